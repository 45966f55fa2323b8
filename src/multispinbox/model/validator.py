from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtGui import QValidator

from multispinbox.model.sections.base import ValidationState

if TYPE_CHECKING:
    from multispinbox.model.composite import MultiSectionModel

_TO_QT_STATE = {
    ValidationState.INVALID: QValidator.State.Invalid,
    ValidationState.INTERMEDIATE: QValidator.State.Intermediate,
    ValidationState.ACCEPTABLE: QValidator.State.Acceptable,
}


class SectionValidator(QValidator):
    """Line-edit validator that delegates to the composite model."""

    def __init__(self, model: MultiSectionModel) -> None:
        super().__init__(model)
        self._model = model

    def validate(self, text: str, pos: int) -> tuple[QValidator.State, str, int]:
        state, text, pos = self._model.validate(text, pos)
        return _TO_QT_STATE[state], text, pos

    def fixup(self, text: str) -> str:
        # Every keystroke is already repaired in validate()
        return text
