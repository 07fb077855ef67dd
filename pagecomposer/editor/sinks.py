"""External collaborator interfaces: notifications and clipboard.

The editor never displays toasts or touches a system clipboard itself. It
talks to these protocols; front-ends supply real implementations, the CLI
and tests use the simple ones below.
"""

from pathlib import Path
from typing import Protocol

from pagecomposer.core.log import get_logger

logger = get_logger(__name__)


class NotificationSink(Protocol):
    """Receives user-facing success messages."""

    def notify(self, message: str) -> None:
        """Show a message to the user."""
        ...


class ClipboardSink(Protocol):
    """Receives exported markup text."""

    def write(self, text: str) -> None:
        """Place text on the clipboard verbatim."""
        ...


class LoggingNotificationSink:
    """Notification sink that logs messages at INFO."""

    def notify(self, message: str) -> None:
        logger.info(message)


class RecordingNotificationSink:
    """Notification sink that keeps every message, oldest first."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class MemoryClipboard:
    """Clipboard that keeps the last written text."""

    def __init__(self) -> None:
        self.text: str | None = None

    def write(self, text: str) -> None:
        self.text = text


class FileClipboard:
    """Clipboard that writes text to a file, replacing its contents.

    Attributes:
        path: Destination file. Parent directories are created on write.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def write(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")
        logger.debug(f"Wrote {len(text)} characters to {self.path}")


__all__ = [
    "NotificationSink",
    "ClipboardSink",
    "LoggingNotificationSink",
    "RecordingNotificationSink",
    "MemoryClipboard",
    "FileClipboard",
]
