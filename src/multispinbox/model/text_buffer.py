"""
Host Text Buffer
================
The editing surface that holds the actual characters and the cursor.

The composite model never owns the characters; it reads and writes them
through this interface and listens to `cursor_position_changed`. Two hosts
exist: `MemoryTextBuffer` below (headless, used by tests and scripts) and
`LineEditTextBuffer` in the view package (wraps a QLineEdit).
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QValidator

logger = logging.getLogger(__name__)


class TextBuffer(QObject):
    """Interface of a single-line text host."""
    cursor_position_changed = Signal(int, int)
    text_changed = Signal(str)

    def text(self) -> str:
        raise NotImplementedError("`text` must be implemented in subclass.")

    def set_text(self, text: str) -> None:
        raise NotImplementedError("`set_text` must be implemented in subclass.")

    def cursor_position(self) -> int:
        raise NotImplementedError("`cursor_position` must be implemented in subclass.")

    def set_cursor_position(self, position: int) -> None:
        raise NotImplementedError("`set_cursor_position` must be implemented in subclass.")

    def selection(self) -> Optional[tuple[int, int]]:
        """Return (start, length) of the selected text, or None."""
        raise NotImplementedError("`selection` must be implemented in subclass.")

    def clear_selection(self) -> None:
        raise NotImplementedError("`clear_selection` must be implemented in subclass.")

    def set_validator(self, validator: Optional[QValidator]) -> None:
        raise NotImplementedError("`set_validator` must be implemented in subclass.")


class MemoryTextBuffer(TextBuffer):
    """
    In-memory line with QLineEdit-like semantics.

    `set_text` is a programmatic write: it bypasses the validator and moves
    the cursor to the end. `type_text` is a user edit: it goes through the
    validator and is rejected when the validator says Invalid.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._text: str = ""
        self._cursor: int = 0
        self._selection: Optional[tuple[int, int]] = None
        self._validator: Optional[QValidator] = None

    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._selection = None
        self._commit(text, len(text))

    def cursor_position(self) -> int:
        return self._cursor

    def set_cursor_position(self, position: int) -> None:
        position = min(max(position, 0), len(self._text))
        if position == self._cursor:
            return
        old = self._cursor
        self._cursor = position
        self.cursor_position_changed.emit(old, position)

    def selection(self) -> Optional[tuple[int, int]]:
        return self._selection

    def select(self, start: int, length: int) -> None:
        start = min(max(start, 0), len(self._text))
        length = min(max(length, 0), len(self._text) - start)
        self._selection = (start, length) if length else None

    def clear_selection(self) -> None:
        self._selection = None

    def set_validator(self, validator: Optional[QValidator]) -> None:
        self._validator = validator

    def type_text(self, text: str, cursor: int) -> bool:
        """
        Commit a user edit the way a line edit does on a keystroke.

        Args:
            text: The full candidate text after the keystroke.
            cursor: The cursor position after the keystroke.

        Returns:
            True if the edit was committed (possibly repaired), False if the
            validator rejected it and the buffer is unchanged.
        """
        if self._validator is not None:
            state, text, cursor = self._validator.validate(text, cursor)
            if state == QValidator.State.Invalid:
                logger.debug(f"Rejected edit {text!r}")
                return False
        self._selection = None
        self._commit(text, cursor)
        return True

    def insert(self, chars: str) -> bool:
        """Type `chars` at the cursor (replacing any selection)."""
        if self._selection:
            start, length = self._selection
        else:
            start, length = self._cursor, 0
        candidate = self._text[:start] + chars + self._text[start + length:]
        return self.type_text(candidate, start + len(chars))

    def backspace(self) -> bool:
        """Delete the selection, or the character before the cursor."""
        if self._selection:
            return self.insert("")
        if self._cursor == 0:
            return False
        candidate = self._text[:self._cursor - 1] + self._text[self._cursor:]
        return self.type_text(candidate, self._cursor - 1)

    def _commit(self, text: str, cursor: int) -> None:
        # Text and cursor land together; listeners see text_changed first
        old_text, old_cursor = self._text, self._cursor
        self._text = text
        self._cursor = min(max(cursor, 0), len(text))
        if text != old_text:
            self.text_changed.emit(text)
        if self._cursor != old_cursor:
            self.cursor_position_changed.emit(old_cursor, self._cursor)
