from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject
from PySide6.QtGui import QValidator
from PySide6.QtWidgets import QLineEdit

from multispinbox.model.text_buffer import TextBuffer


class LineEditTextBuffer(TextBuffer):
    """Host adapter exposing a QLineEdit as a TextBuffer."""

    def __init__(self, line_edit: QLineEdit, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._edit = line_edit
        line_edit.textChanged.connect(self.text_changed)
        line_edit.cursorPositionChanged.connect(self.cursor_position_changed)

    @property
    def line_edit(self) -> QLineEdit:
        return self._edit

    def text(self) -> str:
        return self._edit.text()

    def set_text(self, text: str) -> None:
        self._edit.setText(text)

    def cursor_position(self) -> int:
        return self._edit.cursorPosition()

    def set_cursor_position(self, position: int) -> None:
        self._edit.setCursorPosition(position)

    def selection(self) -> Optional[tuple[int, int]]:
        if not self._edit.hasSelectedText():
            return None
        return self._edit.selectionStart(), len(self._edit.selectedText())

    def clear_selection(self) -> None:
        self._edit.deselect()

    def set_validator(self, validator: Optional[QValidator]) -> None:
        self._edit.setValidator(validator)
