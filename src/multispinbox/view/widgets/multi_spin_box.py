"""
Multi-Section Spin Box
======================
A QAbstractSpinBox whose line edit shows several independently stepped
sections, e.g. "[12:34:56]".

The widget is a thin shell: all parsing, validation and cursor tracking is
done by `MultiSectionModel`, which reads and writes the line edit through a
`LineEditTextBuffer`.
"""
from __future__ import annotations

from typing import Any

from PySide6.QtCore import QSize, Qt, Signal, Slot
from PySide6.QtGui import QFocusEvent
from PySide6.QtWidgets import QAbstractSpinBox, QStyle, QStyleOptionSpinBox, QWidget

from multispinbox.model.composite import MultiSectionModel
from multispinbox.model.sections.base import Section
from multispinbox.view.widgets.line_edit_buffer import LineEditTextBuffer


class MultiSpinBox(QAbstractSpinBox):
    section_count_changed = Signal(int)
    current_section_index_changed = Signal(int)
    text_alignment_changed = Signal(object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("MultiSpinBox")

        self._buffer = LineEditTextBuffer(self.lineEdit(), self)
        self._model = MultiSectionModel(self._buffer, self)

        self._model.section_count_changed.connect(self._on_section_count_changed)
        self._model.current_section_index_changed.connect(self.current_section_index_changed)
        self._model.text_alignment_changed.connect(self._apply_alignment)
        self.setAlignment(self._model.text_alignment())

    @property
    def model(self) -> MultiSectionModel:
        return self._model

    # ---- structure ----

    def clear(self) -> None:
        self._model.clear()

    def insert_section(self, index: int, section: Section, suffix: str = "") -> None:
        self._model.insert_section(index, section, suffix)

    def remove_section(self, index: int) -> Section:
        return self._model.remove_section(index)

    def take_section(self, index: int) -> Section:
        return self._model.take_section(index)

    def get_section(self, index: int) -> Section:
        return self._model.get_section(index)

    def count(self) -> int:
        return self._model.section_count()

    # ---- properties ----

    def current_section_index(self) -> int:
        return self._model.current_section_index()

    def set_current_section_index(self, index: int) -> None:
        self._model.set_current_section_index(index)

    def prefix(self) -> str:
        return self._model.prefix()

    def set_prefix(self, prefix: str) -> None:
        self._model.set_prefix(prefix)
        self.updateGeometry()

    def suffix_of(self, index: int) -> str:
        return self._model.suffix_of(index)

    def set_suffix_of(self, index: int, suffix: str) -> None:
        self._model.set_suffix_of(index, suffix)
        self.updateGeometry()

    def text_alignment(self) -> Qt.AlignmentFlag:
        return self._model.text_alignment()

    def set_text_alignment(self, alignment: Qt.AlignmentFlag) -> None:
        self._model.set_text_alignment(alignment)

    # ---- values ----

    def value_of(self, index: int) -> Any:
        return self._model.value_of(index)

    def set_value_of(self, index: int, value: Any) -> None:
        self._model.set_value_of(index, value)

    def text_of(self, index: int) -> str:
        return self._model.text_of(index)

    def set_text_of(self, index: int, text: str) -> None:
        self._model.set_text_of(index, text)

    # ---- QAbstractSpinBox overrides ----

    def stepBy(self, steps: int) -> None:
        self._model.step_by(steps)

    def stepEnabled(self) -> QAbstractSpinBox.StepEnabledFlag:
        if not self._model.step_enabled() or self.isReadOnly():
            return QAbstractSpinBox.StepEnabledFlag.StepNone
        return QAbstractSpinBox.StepEnabledFlag.StepUpEnabled | QAbstractSpinBox.StepEnabledFlag.StepDownEnabled

    def focusInEvent(self, event: QFocusEvent) -> None:
        super().focusInEvent(event)
        self._model.refresh_current_section()

    def sizeHint(self) -> QSize:
        hint = super().sizeHint()
        option = QStyleOptionSpinBox()
        self.initStyleOption(option)
        buttons = self.style().subControlRect(
            QStyle.ComplexControl.CC_SpinBox, option, QStyle.SubControl.SC_SpinBoxUp, self
        )
        # Whole text is always visible, no elision
        width = self.fontMetrics().horizontalAdvance(self.text() or " ") + buttons.width() + 14
        return QSize(max(hint.width(), width), hint.height())

    def minimumSizeHint(self) -> QSize:
        return self.sizeHint()

    # ---- slots ----

    @Slot(int)
    def _on_section_count_changed(self, count: int) -> None:
        self.updateGeometry()
        self.section_count_changed.emit(count)

    @Slot(object)
    def _apply_alignment(self, alignment: Qt.AlignmentFlag) -> None:
        self.setAlignment(alignment)
        self.update()
        self.text_alignment_changed.emit(alignment)
