"""Logging micro API for page-composer."""

from .lib import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
