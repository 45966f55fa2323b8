from __future__ import annotations

from dataclasses import dataclass, field

from multispinbox.model.sections.base import Section


@dataclass
class SectionSlot:
    """
    A section plus its trailing delimiter, as stored in the model.

    `text` mirrors what the section currently shows in the full string and
    `start_offset` is where that text begins (-1 until the slot is placed).
    """
    section: Section
    suffix: str = ""
    text: str = ""
    start_offset: int = field(default=-1)

    @property
    def full_text(self) -> str:
        return self.text + self.suffix

    @property
    def full_length(self) -> int:
        return len(self.text) + len(self.suffix)

    @property
    def end_offset(self) -> int:
        """Offset right after the section text (where the suffix starts)."""
        return self.start_offset + len(self.text)

    def shift(self, offset: int) -> None:
        """Move the slot by `offset` characters (negative moves left)."""
        if self.start_offset >= 0:
            self.start_offset += offset
