from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TextSpan:
    """A slice of the full text: absolute start offset and the sliced text."""
    start: int
    text: str

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    def contains(self, position: int) -> bool:
        """Inclusive on both ends, so a cursor right after the text still hits."""
        return self.start <= position <= self.end


def simplify(text: str) -> str:
    """
    Collapse internal whitespace runs to single spaces.

    Leading and trailing whitespace characters are kept verbatim, so a suffix
    like " : " keeps its padding while "a \t b" becomes "a b".

    Args:
        text: The text to sanitise (typically a user supplied suffix or prefix).

    Returns:
        The simplified text. Whitespace-only input is returned unchanged.
    """
    if not text:
        return text
    core = " ".join(text.split())
    if not core:
        return text

    lead_len = len(text) - len(text.lstrip())
    trail_len = len(text) - len(text.rstrip())
    leading = text[:lead_len]
    trailing = text[len(text) - trail_len:] if trail_len else ""
    return leading + core + trailing
