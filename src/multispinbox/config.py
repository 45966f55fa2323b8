"""
Configuration & Global Constants
================================
This module serves as the central registry for constants shared by the model,
the widget and the demo application.

Exports:
    RESERVED_CHARACTERS (frozenset): Characters no section may accept.
    DEFAULT_TEXT_ALIGNMENT (Qt.AlignmentFlag): Initial alignment of the text.
    LOG_LEVEL (str): Name of the logging level (env MULTISPINBOX_LOG_LEVEL).
    LOG_FILE (str | None): Optional log file path (env MULTISPINBOX_LOG_FILE).
"""
import logging
import os
from typing import Optional

from PySide6.QtCore import Qt


# Structural whitespace: NUL, tab, line feed, carriage return, space, nbsp
RESERVED_CHARACTERS: frozenset[str] = frozenset("\x00\t\n\r \u00a0")

DEFAULT_TEXT_ALIGNMENT: Qt.AlignmentFlag = Qt.AlignmentFlag.AlignCenter

LOG_LEVEL: str = os.environ.get("MULTISPINBOX_LOG_LEVEL", "INFO")
LOG_FILE: Optional[str] = os.environ.get("MULTISPINBOX_LOG_FILE") or None


def get_log_level(name: Optional[str] = None) -> int:
    """
    Resolve a logging level name (e.g. "DEBUG") to its numeric value.

    Unknown names fall back to logging.INFO.
    """
    level = logging.getLevelName((name or LOG_LEVEL).upper())
    if isinstance(level, int):
        return level
    return logging.INFO
