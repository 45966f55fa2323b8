"""
Section Contract
================
A section is one independently validated value inside the composite text
(e.g. the "34" in "12:34:56").

Every concrete section implements the same fixed operation set so the
composite model can treat them uniformly:

    validate        -> three-state verdict plus a possibly repaired text
    default_text    -> text used to populate a freshly inserted section
    value_from_text -> typed value codec (text -> value)
    text_from_value -> typed value codec (value -> text, None if impossible)
    step_by         -> value arithmetic for up/down stepping
    acceptable_char -> used to enforce the reserved-character rule
"""
from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional

from multispinbox.config import RESERVED_CHARACTERS


class ValidationState(IntEnum):
    """Verdict for in-progress input. Values mirror QValidator.State."""
    INVALID = 0
    INTERMEDIATE = 1
    ACCEPTABLE = 2


ValidationResult = tuple[ValidationState, str, int]


class Section:
    """Base class for section variants."""
    KEY: str = "base"  # Override in subclass

    # ---- bounds ----

    @property
    def min_input_length(self) -> int:
        raise NotImplementedError("`min_input_length` must be implemented in subclass.")

    @property
    def max_input_length(self) -> int:
        raise NotImplementedError("`max_input_length` must be implemented in subclass.")

    # ---- abstract API for subclasses ----

    def acceptable_char(self, char: str) -> bool:
        raise NotImplementedError("`acceptable_char` must be implemented in subclass.")

    def validate(self, text: str, pos: int) -> ValidationResult:
        """
        Check a candidate section text.

        Args:
            text: The raw text of this section only (no prefix/suffix).
            pos: Cursor position relative to the start of `text`, or -1 when
                the cursor is outside this section.

        Returns:
            (state, text, pos) where text/pos may be a repaired version of
            the input.
        """
        raise NotImplementedError("`validate` must be implemented in subclass.")

    def default_value(self) -> Any:
        raise NotImplementedError("`default_value` must be implemented in subclass.")

    def value_from_text(self, text: str) -> Any:
        raise NotImplementedError("`value_from_text` must be implemented in subclass.")

    def text_from_value(self, value: Any) -> Optional[str]:
        raise NotImplementedError("`text_from_value` must be implemented in subclass.")

    def step_by(self, value: Any, steps: int) -> Any:
        raise NotImplementedError("`step_by` must be implemented in subclass.")

    # ---- shared behaviour ----

    def default_text(self) -> Optional[str]:
        return self.text_from_value(self.default_value())

    def reserved_characters_accepted(self) -> list[str]:
        """Return the reserved characters this section would accept (should be empty)."""
        return [c for c in sorted(RESERVED_CHARACTERS) if self.acceptable_char(c)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(min={self.min_input_length}, max={self.max_input_length})"


def overwrite_repair(text: str, pos: int, width: int) -> tuple[str, int]:
    """
    Emulate overwrite typing on a fixed-width field.

    When one character was inserted into an already full field, drop the
    character right after the cursor so the width is restored.
    """
    if len(text) == width + 1 and 0 < pos <= width:
        return text[:pos] + text[pos + 1:], pos
    return text, pos
