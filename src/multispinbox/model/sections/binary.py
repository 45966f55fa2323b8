from __future__ import annotations

import re
from typing import Any, Optional

from multispinbox.model.sections.base import Section, ValidationResult, ValidationState, overwrite_repair
from multispinbox.model.sections.registry import register_section

_BIN_PATTERN = re.compile(r"[01]+")


@register_section
class BinarySection(Section):
    """Exactly `width` binary digits; the value is the unsigned integer they spell."""
    KEY = "binary"

    def __init__(self, width: int = 8, default: int = 0) -> None:
        if width < 1:
            raise ValueError(f"width must be positive, got {width}")
        if not 0 <= default < 2 ** width:
            raise ValueError(f"default {default} does not fit in {width} bits")
        self.width = width
        self._default = default

    @property
    def min_input_length(self) -> int:
        return self.width

    @property
    def max_input_length(self) -> int:
        return self.width

    def acceptable_char(self, char: str) -> bool:
        return char in ("0", "1")

    def validate(self, text: str, pos: int) -> ValidationResult:
        if pos >= 0:
            text, pos = overwrite_repair(text, pos, self.width)
        if not all(self.acceptable_char(c) for c in text):
            return ValidationState.INVALID, text, pos
        if len(text) > self.width:
            return ValidationState.INVALID, text, pos
        if len(text) < self.width:
            return ValidationState.INTERMEDIATE, text, pos
        return ValidationState.ACCEPTABLE, text, pos

    def default_value(self) -> int:
        return self._default

    def value_from_text(self, text: str) -> Optional[int]:
        if not _BIN_PATTERN.fullmatch(text):
            return None
        return int(text, 2)

    def text_from_value(self, value: Any) -> Optional[str]:
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        if not 0 <= value < 2 ** self.width:
            return None
        return format(value, f"0{self.width}b")

    def step_by(self, value: Any, steps: int) -> int:
        # Adding to the value flips the low bit and carries upwards
        if value is None:
            value = self._default
        return (value + steps) % (2 ** self.width)
