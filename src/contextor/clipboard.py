"""Clipboard access for the monitor."""
import logging
from abc import ABC, abstractmethod
from typing import Optional

import pyperclip

from .exceptions import ClipboardError
from .models import ClipboardSnapshot

logger = logging.getLogger(__name__)


class Clipboard(ABC):
    """The three clipboard primitives the monitor relies on."""

    @abstractmethod
    def read_string(self) -> Optional[str]:
        """Return the current string content, or None when there is none."""
        pass

    @abstractmethod
    def write_string(self, text: str) -> None:
        """Replace the clipboard content with text."""
        pass

    @abstractmethod
    def change_counter(self) -> int:
        """Return a counter that increases on every write from any source."""
        pass


class PyperclipClipboard(Clipboard):
    """System clipboard through pyperclip.

    pyperclip has no change counter, so one is derived from content: the
    counter is bumped whenever the text read differs from the last snapshot.
    After our own writes the snapshot is re-captured from the clipboard so
    that platform newline conversion does not look like an external change.
    """

    def __init__(self):
        self._snapshot = ClipboardSnapshot(change_count=0, text=self._paste())

    @property
    def snapshot(self) -> ClipboardSnapshot:
        return self._snapshot

    def read_string(self) -> Optional[str]:
        return self._paste() or None

    def write_string(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Failed to write clipboard: {e}") from e
        self._snapshot = ClipboardSnapshot(
            change_count=self._snapshot.change_count + 1,
            text=self._paste(),
        )
        logger.debug(f"Copied {len(text)} characters to clipboard")

    def change_counter(self) -> int:
        text = self._paste()
        if text != self._snapshot.text:
            self._snapshot = ClipboardSnapshot(
                change_count=self._snapshot.change_count + 1,
                text=text,
            )
        return self._snapshot.change_count

    @staticmethod
    def _paste() -> str:
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Failed to read clipboard: {e}") from e
