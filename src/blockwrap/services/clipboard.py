"""Clipboard sinks for copied blocks.

A sink has a single operation, write(text). Copying is fire-and-forget: sinks
raise ClipboardError when the write fails, and copy_text() logs that instead
of passing it on.
"""

from typing import Protocol

import structlog

from blockwrap.services.exceptions import ClipboardError

logger = structlog.get_logger()


class ClipboardSink(Protocol):
    """Anything that can put a string on a clipboard."""

    def write(self, text: str) -> None:
        ...


class TextualClipboard:
    """Clipboard sink backed by a running Textual app.

    Textual writes through the terminal (OSC 52), which works over SSH but
    depends on terminal support.
    """

    def __init__(self, app):
        """Initialize TextualClipboard.

        Args:
            app: The running textual.app.App
        """
        self.app = app

    def write(self, text: str) -> None:
        try:
            self.app.copy_to_clipboard(text)
        except Exception as e:
            raise ClipboardError(f"Terminal clipboard unavailable: {e}") from e


def copy_text(sink: ClipboardSink, text: str) -> bool:
    """
    Write text to a clipboard sink without surfacing failures.

    Args:
        sink: Destination clipboard
        text: Text to copy

    Returns:
        True if the sink accepted the text
    """
    try:
        sink.write(text)
    except ClipboardError as e:
        logger.warning("clipboard_write_failed", error=str(e), characters=len(text))
        return False

    logger.info("clipboard_written", characters=len(text))
    return True
