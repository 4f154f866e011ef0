"""
Clipboard access for clipstash.

ClipboardGateway is the two-method interface the application needs. The
production implementation uses pyperclip; MemoryClipboard keeps the value in
process and is used by the tests.
"""

import logging
from typing import Protocol

import pyperclip

from clipstash.errors import ClipboardUnavailableError

logger = logging.getLogger(__name__)


class ClipboardGateway(Protocol):
    def read(self) -> str: ...

    def write(self, text: str) -> None: ...


class PyperclipClipboard:
    """System clipboard via pyperclip. Calls block until the OS answers."""

    def read(self) -> str:
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            logger.warning("Clipboard read failed: %s", e)
            raise ClipboardUnavailableError(f"Could not read the clipboard: {e}") from e
        # Some backends return None for an empty clipboard.
        return text or ""

    def write(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.warning("Clipboard write failed: %s", e)
            raise ClipboardUnavailableError(
                f"Could not write to the clipboard: {e}"
            ) from e


class MemoryClipboard:
    """In-process clipboard."""

    def __init__(self, text: str = "") -> None:
        self.text = text

    def read(self) -> str:
        return self.text

    def write(self, text: str) -> None:
        self.text = text


__all__ = ["ClipboardGateway", "PyperclipClipboard", "MemoryClipboard"]
