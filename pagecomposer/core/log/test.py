"""Tests for core logging module."""

import logging
from io import StringIO

from .lib import get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "pagecomposer"

    def test_setup_logging_writes_to_stream(self) -> None:
        """Configured stream receives formatted records."""
        stream = StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        get_logger("test_setup").debug("test message")
        output = stream.getvalue()
        assert "test_setup - DEBUG - test message" in output

    def test_setup_logging_accepts_level_name(self) -> None:
        """Level names are resolved case-insensitively."""
        stream = StringIO()
        setup_logging(level="warning", stream=stream)
        assert logging.getLogger().level == logging.WARNING

    def test_setup_logging_unknown_level_name(self) -> None:
        """Unknown level names fall back to INFO."""
        setup_logging(level="chatty", stream=StringIO())
        assert logging.getLogger().level == logging.INFO
