from __future__ import annotations

import re
from typing import Any, Optional

from multispinbox.model.sections.base import Section, ValidationResult, ValidationState, overwrite_repair
from multispinbox.model.sections.registry import register_section

_INT_PATTERN = re.compile(r"-?[0-9]+")


@register_section
class IntegerSection(Section):
    """
    Integer value clamped to [minimum, maximum].

    With `width` the text is zero padded to exactly `width` digits (clock
    style "07"); without it the text is the plain decimal form. Stepping
    clamps at the bounds unless `wrapping` is set.
    """
    KEY = "integer"

    def __init__(
        self,
        minimum: int = 0,
        maximum: int = 99,
        default: Optional[int] = None,
        *,
        width: Optional[int] = None,
        wrapping: bool = False
    ) -> None:
        if minimum > maximum:
            raise ValueError(f"minimum ({minimum}) must not exceed maximum ({maximum})")
        digits = max(len(str(abs(minimum))), len(str(abs(maximum))))
        if width is not None:
            if minimum < 0:
                raise ValueError("fixed width is only supported for non-negative ranges")
            if width < digits:
                raise ValueError(f"width {width} cannot hold {digits} digits")
        if default is None:
            default = min(max(0, minimum), maximum)
        if not minimum <= default <= maximum:
            raise ValueError(f"default {default} outside [{minimum}, {maximum}]")

        self.minimum = minimum
        self.maximum = maximum
        self.width = width
        self.wrapping = wrapping
        self._default = default
        self._max_length = width if width is not None else digits + (1 if minimum < 0 else 0)

    @property
    def min_input_length(self) -> int:
        return self.width if self.width is not None else 1

    @property
    def max_input_length(self) -> int:
        return self._max_length

    def acceptable_char(self, char: str) -> bool:
        if char == "-":
            return self.minimum < 0
        return char in "0123456789"

    def validate(self, text: str, pos: int) -> ValidationResult:
        if self.width is not None and pos >= 0:
            text, pos = overwrite_repair(text, pos, self.width)

        if text == "" or (text == "-" and self.minimum < 0):
            return ValidationState.INTERMEDIATE, text, pos
        if not _INT_PATTERN.fullmatch(text) or not all(self.acceptable_char(c) for c in text):
            return ValidationState.INVALID, text, pos
        if len(text) > self.max_input_length:
            return ValidationState.INVALID, text, pos

        value = int(text)
        complete = self.width is None or len(text) == self.width
        if complete and self.minimum <= value <= self.maximum:
            return ValidationState.ACCEPTABLE, text, pos
        if self._can_complete(text):
            return ValidationState.INTERMEDIATE, text, pos
        return ValidationState.INVALID, text, pos

    def _can_complete(self, text: str) -> bool:
        """True if appending digits (within the length limit) can reach the range."""
        negative = text.startswith("-")
        magnitude = int(text.lstrip("-"))
        for extra in range(1, self.max_input_length - len(text) + 1):
            low = magnitude * 10 ** extra
            high = low + 10 ** extra - 1
            if negative:
                low, high = -high, -low
            if low <= self.maximum and high >= self.minimum:
                return True
        return False

    def default_value(self) -> int:
        return self._default

    def value_from_text(self, text: str) -> Optional[int]:
        if not _INT_PATTERN.fullmatch(text):
            return None
        return int(text)

    def text_from_value(self, value: Any) -> Optional[str]:
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        if not self.minimum <= value <= self.maximum:
            return None
        if self.width is not None:
            return f"{value:0{self.width}d}"
        return str(value)

    def step_by(self, value: Any, steps: int) -> int:
        if value is None:
            value = self._default
        value += steps
        if self.wrapping:
            span = self.maximum - self.minimum + 1
            return self.minimum + (value - self.minimum) % span
        return min(max(value, self.minimum), self.maximum)
