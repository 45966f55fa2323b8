"""
Demo Main Window
================
Shows a few multi-section spin boxes side by side and lets the user toggle
enabled state, text alignment and the current section of all of them.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QGridLayout, QGroupBox, QFormLayout,
    QCheckBox, QComboBox, QSpinBox, QLabel, QSizePolicy
)
from PySide6.QtGui import QAction

from multispinbox.model.sections import create_section
from multispinbox.view.widgets.multi_spin_box import MultiSpinBox

logger = logging.getLogger(__name__)

ALIGNMENTS: list[tuple[str, Qt.AlignmentFlag]] = [
    ("Qt::AlignLeft", Qt.AlignmentFlag.AlignLeft),
    ("Qt::AlignRight", Qt.AlignmentFlag.AlignRight),
    ("Qt::AlignHCenter", Qt.AlignmentFlag.AlignHCenter),
    ("Qt::AlignJustify", Qt.AlignmentFlag.AlignJustify),
    ("Qt::AlignCenter", Qt.AlignmentFlag.AlignCenter),
]


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("MultiSpinBox Demo")

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        # --- options ---
        options = QGroupBox(self.tr("Options"))
        form = QFormLayout(options)

        self.check_enable = QCheckBox(self.tr("Enabled"))
        self.check_enable.setChecked(True)
        form.addRow(self.check_enable)

        self.combo_text_align = QComboBox()
        for label, flag in ALIGNMENTS:
            self.combo_text_align.addItem(label, flag.value)
        self.combo_text_align.setCurrentIndex(self.combo_text_align.count() - 1)
        form.addRow(self.tr("Text alignment:"), self.combo_text_align)

        self.spin_current_section = QSpinBox()
        self.spin_current_section.setRange(-1, 9)
        form.addRow(self.tr("Current section:"), self.spin_current_section)
        layout.addWidget(options)

        # --- spin boxes ---
        boxes = QGroupBox(self.tr("Spin boxes"))
        self.grid = QGridLayout(boxes)
        self.spin_boxes: list[MultiSpinBox] = []
        self._build_row_binary(0)
        self._build_row_clock(1)
        self._build_row_address(2)
        layout.addWidget(boxes)
        layout.addStretch()

        quit_action = QAction(self.tr("&Quit"), self)
        quit_action.triggered.connect(self.close)
        self.menuBar().addMenu(self.tr("&File")).addAction(quit_action)

        self.check_enable.toggled.connect(self.update_all_with_options)
        self.spin_current_section.valueChanged.connect(self.update_all_with_options)
        self.combo_text_align.currentIndexChanged.connect(self.update_all_with_options)
        self.update_all_with_options()

    def _add_spin_box(self, row: int, column: int) -> MultiSpinBox:
        box = MultiSpinBox(self)
        box.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Maximum)
        self.grid.addWidget(box, row, column + 1)
        self.spin_boxes.append(box)
        return box

    def _build_row_binary(self, row: int) -> None:
        self.grid.addWidget(QLabel(self.tr("Binary")), row, 0)
        plain = self._add_spin_box(row, 0)
        plain.insert_section(0, create_section("binary"))

        bracketed = self._add_spin_box(row, 1)
        bracketed.set_prefix("[")
        bracketed.insert_section(0, create_section("binary"), "]")

    def _build_row_clock(self, row: int) -> None:
        self.grid.addWidget(QLabel(self.tr("Clock")), row, 0)
        clock = self._add_spin_box(row, 0)
        clock.insert_section(0, create_section("integer", minimum=0, maximum=23, width=2, wrapping=True), ":")
        clock.insert_section(1, create_section("integer", minimum=0, maximum=59, width=2, wrapping=True), ":")
        clock.insert_section(2, create_section("integer", minimum=0, maximum=59, width=2, wrapping=True))

        stamp = self._add_spin_box(row, 1)
        stamp.set_prefix("[")
        stamp.insert_section(0, create_section("integer", minimum=0, maximum=99, width=2), ":")
        stamp.insert_section(1, create_section("integer", minimum=0, maximum=99, width=2))

    def _build_row_address(self, row: int) -> None:
        self.grid.addWidget(QLabel(self.tr("Address")), row, 0)
        address = self._add_spin_box(row, 0)
        for i in range(4):
            suffix = "." if i < 3 else ""
            address.insert_section(i, create_section("integer", minimum=0, maximum=255, default=127 if i == 0 else 0), suffix)
        address.set_value_of(3, 1)

    @Slot()
    def update_all_with_options(self) -> None:
        alignment = Qt.AlignmentFlag(self.combo_text_align.currentData())
        for box in self.spin_boxes:
            box.setEnabled(self.check_enable.isChecked())
            box.set_text_alignment(alignment)
            box.set_current_section_index(self.spin_current_section.value())
        logger.debug(f"Options applied to {len(self.spin_boxes)} spin boxes")
