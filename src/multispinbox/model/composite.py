"""
Composite Section Model
=======================
Keeps a single line of text of the form

    prefix + text_0 + suffix_0 + text_1 + suffix_1 + ... + text_n + suffix_n

consistent with an ordered list of section slots.

Responsibilities:
1. Structure: insert/take sections, change prefix and suffixes, and keep each
   slot's start offset up to date incrementally.
2. Parsing: split a candidate string back into per-section spans and validate
   (or repair) it section by section.
3. Tracking: map the host cursor to the current section index.

The characters themselves live in a `TextBuffer` owned by the host. The model
is the only writer during structural edits and listens to the buffer for
everything else.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Iterator, Optional, Sequence

from PySide6.QtCore import QObject, Qt, Signal

from multispinbox.config import DEFAULT_TEXT_ALIGNMENT
from multispinbox.errors import ConsistencyError, PreconditionError
from multispinbox.model.sections.base import Section, ValidationResult, ValidationState
from multispinbox.model.slot import SectionSlot
from multispinbox.model.text_buffer import MemoryTextBuffer, TextBuffer
from multispinbox.model.validator import SectionValidator
from multispinbox.utils import TextSpan, simplify

logger = logging.getLogger(__name__)


class MultiSectionModel(QObject):
    """Ordered sections over one line of text, with a constant prefix."""
    section_count_changed = Signal(int)
    current_section_index_changed = Signal(int)
    text_alignment_changed = Signal(object)

    def __init__(self, buffer: TextBuffer | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._buffer: TextBuffer = buffer if buffer is not None else MemoryTextBuffer(self)
        self._prefix: str = ""
        self._slots: list[SectionSlot] = []
        self._current_section_index: int = -1
        self._text_alignment: Qt.AlignmentFlag = DEFAULT_TEXT_ALIGNMENT
        self._suspended: int = 0

        self._validator = SectionValidator(self)
        self._buffer.set_validator(self._validator)
        self._buffer.cursor_position_changed.connect(self._on_cursor_position_changed)
        self._buffer.text_changed.connect(self._on_text_changed)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def buffer(self) -> TextBuffer:
        return self._buffer

    @property
    def validator(self) -> SectionValidator:
        return self._validator

    def text(self) -> str:
        return self._buffer.text()

    def section_count(self) -> int:
        return len(self._slots)

    def get_section(self, index: int) -> Section:
        """Borrow the section at `index`; the model keeps ownership."""
        self._check_index(index)
        return self._slots[index].section

    def start_offset_of(self, index: int) -> int:
        """Offset in the full text where section `index` begins."""
        self._check_index(index)
        return self._slots[index].start_offset

    def current_section_index(self) -> int:
        return self._current_section_index

    def prefix(self) -> str:
        return self._prefix

    def suffix_of(self, index: int) -> str:
        self._check_index(index)
        return self._slots[index].suffix

    def text_alignment(self) -> Qt.AlignmentFlag:
        return self._text_alignment

    def set_text_alignment(self, alignment: Qt.AlignmentFlag) -> None:
        self._text_alignment = alignment
        self.text_alignment_changed.emit(alignment)

    def step_enabled(self) -> bool:
        return bool(self._slots)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Drop the prefix and every section."""
        had_sections = bool(self._slots)
        with self._suspend_tracking():
            self._slots.clear()
            self._prefix = ""
            self._buffer.clear_selection()
            self._buffer.set_text("")
            self._buffer.set_cursor_position(0)
        if had_sections:
            self.section_count_changed.emit(0)
        self._set_current(-1)

    def insert_section(self, index: int, section: Section, suffix: str = "") -> None:
        """
        Insert `section` at `index`, followed by `suffix`.

        The section shows its default text. The cursor moves to the start of
        the new section, which becomes the current one.

        Raises:
            PreconditionError: If the index, the section or the suffix cannot
                be accepted. Nothing is modified in that case.
        """
        count = len(self._slots)
        if not 0 <= index <= count:
            raise PreconditionError(f"Insert index {index} outside [0, {count}]")
        if section is None:
            raise PreconditionError("Cannot insert a missing section")
        self._check_section(section)

        suffix = simplify(suffix)
        if index != count and not suffix:
            raise PreconditionError(f"Section inserted at {index} of {count} needs a non-empty suffix")
        if index > 0 and not self._slots[index - 1].suffix:
            raise PreconditionError(f"Section {index - 1} has an empty suffix; nothing can follow it")

        default_text = section.default_text()
        if default_text is None:
            logger.warning(f"{section!r}: text of default value is invalid")
            default_text = ""

        text = self.text()
        start = self._slot_start(index)
        slot = SectionSlot(section=section, suffix=suffix, text=default_text, start_offset=start)
        new_text = text[:start] + slot.full_text + text[start:]
        candidate = self._slots[:index] + [slot] + self._slots[index:]
        if not self._split_matches(new_text, candidate):
            raise PreconditionError(
                f"Default text {default_text!r} collides with the delimiters of {new_text!r}"
            )

        logger.debug(f"insert at {index}: {text!r} -> {new_text!r} (text index {start})")
        with self._suspend_tracking():
            self._slots.insert(index, slot)
            for following in self._slots[index + 1:]:
                following.shift(slot.full_length)
            self._buffer.set_text(new_text)
            self._buffer.set_cursor_position(start)

        self.section_count_changed.emit(len(self._slots))
        self._set_current(index)

    def take_section(self, index: int) -> Section:
        """
        Detach the section at `index` and hand it back to the caller.

        When the taken section was current, the previous section becomes
        current (none when the first one is taken) and the cursor moves to
        its end. Otherwise the current section is recomputed from the
        shifted cursor.
        """
        self._check_index(index)
        slot = self._slots[index]
        text = self.text()
        start = slot.start_offset
        end = start + slot.full_length
        cursor = self._buffer.cursor_position()

        current = self._current_section_index
        new_current = index - 1

        with self._suspend_tracking():
            del self._slots[index]
            for following in self._slots[index:]:
                following.shift(-slot.full_length)
            self._buffer.set_text(text[:start] + text[end:])

            if current == index:
                cursor = self._slots[new_current].end_offset if new_current >= 0 else len(self._prefix)
            elif cursor >= end:
                cursor -= slot.full_length
            elif cursor > start:
                cursor = start
            self._buffer.set_cursor_position(cursor)

        slot.start_offset = -1
        self.section_count_changed.emit(len(self._slots))
        if current == index:
            self._set_current(new_current)
        else:
            # The cursor may have been pulled out of the removed suffix into a section
            self._track_cursor(self._buffer.cursor_position())
        return slot.section

    def remove_section(self, index: int) -> Section:
        """Remove the section at `index`; ownership goes back to the caller."""
        section = self.take_section(index)
        logger.debug(f"removed {section!r} from index {index}")
        return section

    def set_prefix(self, prefix: str) -> None:
        prefix = simplify(prefix)
        old = self._prefix
        if prefix == old:
            return
        text = self.text()
        if not text.startswith(old):
            raise ConsistencyError(f"Text {text!r} lost its prefix {old!r}")

        delta = len(prefix) - len(old)
        cursor = self._buffer.cursor_position()
        with self._suspend_tracking():
            self._prefix = prefix
            for slot in self._slots:
                slot.shift(delta)
            self._buffer.set_text(prefix + text[len(old):])
            self._buffer.set_cursor_position(cursor + delta if cursor >= len(old) else min(cursor, len(prefix)))
        self._track_cursor(self._buffer.cursor_position())

    def set_suffix_of(self, index: int, suffix: str) -> None:
        self._check_index(index)
        suffix = simplify(suffix)
        slot = self._slots[index]
        if not suffix and index != len(self._slots) - 1:
            raise PreconditionError(f"Only the last section may have an empty suffix (index {index})")

        text = self.text()
        start = slot.end_offset
        end = start + len(slot.suffix)
        new_text = text[:start] + suffix + text[end:]
        candidate = list(self._slots)
        candidate[index] = replace(slot, suffix=suffix)
        if not self._split_matches(new_text, candidate):
            raise PreconditionError(f"Suffix {suffix!r} collides with the text of {new_text!r}")

        delta = len(suffix) - len(slot.suffix)
        cursor = self._buffer.cursor_position()
        with self._suspend_tracking():
            slot.suffix = suffix
            for following in self._slots[index + 1:]:
                following.shift(delta)
            self._buffer.set_text(new_text)
            if cursor >= end:
                cursor += delta
            elif cursor > start:
                cursor = start
            self._buffer.set_cursor_position(cursor)
        self._track_cursor(self._buffer.cursor_position())

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def text_of(self, index: int) -> str:
        self._check_index(index)
        return self.text_at(self.text(), index)

    def value_of(self, index: int) -> Any:
        section = self.get_section(index)
        return section.value_from_text(self.text_of(index))

    def set_value_of(self, index: int, value: Any) -> None:
        section = self.get_section(index)
        text = section.text_from_value(value)
        if text is None:
            logger.warning(f"{section!r}: value {value!r} has no valid text, keeping {self.text_of(index)!r}")
            return
        self.set_text_of(index, text)

    def set_text_of(self, index: int, text: str) -> None:
        section = self.get_section(index)
        state, text, _ = section.validate(text, -1)
        if state == ValidationState.INVALID:
            raise PreconditionError(f"{text!r} is not a valid text for {section!r}")
        self._change_text(self.set_text_at(self.text(), index, text))

    def step_by(self, steps: int) -> None:
        """Step the value of the current section; no-op without one."""
        index = self._current_section_index
        if index < 0:
            return
        section = self._slots[index].section
        value = section.value_from_text(self.text_at(self.text(), index))
        value = section.step_by(value, steps)
        text = section.text_from_value(value)
        if text is None:
            logger.warning(f"{section!r}: stepped value {value!r} has no valid text")
            return
        self._change_text(self.set_text_at(self.text(), index, text))

    # ------------------------------------------------------------------
    # Current section
    # ------------------------------------------------------------------

    def set_current_section_index(self, index: int) -> None:
        """
        Select a section and put the cursor at its start.

        Out-of-range indices select the first section (or none when the
        model is empty). Notifies only when the index actually changes.
        """
        if not self._slots:
            index = -1
        elif not 0 <= index < len(self._slots):
            index = 0
        if index >= 0:
            with self._suspend_tracking():
                self._buffer.set_cursor_position(self._slots[index].start_offset)
        self._set_current(index)

    def refresh_current_section(self) -> None:
        """Recompute the current section from the host cursor."""
        self._track_cursor(self._buffer.cursor_position())

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def check_and_split(self, text: str) -> Optional[list[TextSpan]]:
        """
        Split `text` into one span per section.

        Returns:
            The spans (absolute offsets) or None if the prefix or any
            suffix cannot be found in order.
        """
        return self._split(text, self._slots)

    def text_index(self, text: str, section_count: int) -> int:
        """
        Offset in `text` where section number `section_count` begins.

        Returns -1 if the prefix does not match or a required suffix is
        missing. With an empty last suffix, `section_count == count` maps to
        the end of the text.
        """
        count = len(self._slots)
        if not 0 <= section_count <= count:
            raise PreconditionError(f"Section count {section_count} outside [0, {count}]")
        if not text.startswith(self._prefix):
            return -1
        index = len(self._prefix)
        for i in range(section_count):
            suffix = self._slots[i].suffix
            if suffix:
                found = text.find(suffix, index)
                if found < 0:
                    return -1
                index = found + len(suffix)
            elif i + 1 == section_count == count:
                return len(text)
            else:
                return -1
        return index

    def validate(self, text: str, pos: int) -> ValidationResult:
        """
        Validate a full candidate text, repairing sections where they can.

        Returns:
            (state, text, pos): the aggregated state and the possibly
            repaired text and cursor position.
        """
        spans = self.check_and_split(text)
        if spans is None:
            logger.debug(f"validate: {text!r} does not split")
            return ValidationState.INVALID, text, pos

        state = ValidationState.ACCEPTABLE
        new_text = text
        new_pos = pos
        offset = len(self._prefix)
        for slot, span in zip(self._slots, spans):
            relative = pos - span.start if span.contains(pos) else -1
            section_state, fixed, fixed_pos = slot.section.validate(span.text, relative)
            if section_state == ValidationState.INVALID:
                logger.debug(f"validate: {span.text!r} rejected by {slot.section!r}")
                return ValidationState.INVALID, text, pos
            if section_state == ValidationState.INTERMEDIATE:
                state = ValidationState.INTERMEDIATE

            if fixed != span.text:
                new_text = new_text[:offset] + fixed + new_text[offset + span.length:]
            if relative >= 0:
                new_pos = offset + fixed_pos
            elif pos > span.end:
                new_pos += len(fixed) - span.length
            offset += len(fixed) + len(slot.suffix)

        logger.debug(f"validate: {text!r} -> {new_text!r} {state.name}")
        return state, new_text, new_pos

    def text_at(self, text: str, index: int) -> str:
        spans = self._require_split(text)
        self._check_index(index)
        return spans[index].text

    def set_text_at(self, text: str, index: int, section_text: str) -> str:
        spans = self._require_split(text)
        self._check_index(index)
        span = spans[index]
        return text[:span.start] + section_text + text[span.end:]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _split(self, text: str, slots: Sequence[SectionSlot]) -> Optional[list[TextSpan]]:
        if not text.startswith(self._prefix):
            logger.debug("check_and_split: invalid prefix")
            return None
        position = len(self._prefix)
        spans: list[TextSpan] = []
        for i, slot in enumerate(slots):
            if slot.suffix:
                found = text.find(slot.suffix, position)
                if found < 0:
                    logger.debug("check_and_split: cannot find next suffix")
                    return None
                spans.append(TextSpan(position, text[position:found]))
                position = found + len(slot.suffix)
            else:
                if i != len(slots) - 1:
                    logger.debug("check_and_split: empty suffix before the last section")
                    return None
                spans.append(TextSpan(position, text[position:]))
                position = len(text)
        if position != len(text):
            logger.debug("check_and_split: trailing text after the last suffix")
            return None
        return spans

    def _split_matches(self, text: str, slots: Sequence[SectionSlot]) -> bool:
        """True if `text` splits back into exactly the texts held by `slots`."""
        spans = self._split(text, slots)
        return spans is not None and [s.text for s in spans] == [slot.text for slot in slots]

    def _require_split(self, text: str) -> list[TextSpan]:
        spans = self.check_and_split(text)
        if spans is None:
            raise ConsistencyError(f"Text {text!r} does not match the section layout")
        return spans

    def _slot_start(self, index: int) -> int:
        if index < len(self._slots):
            return self._slots[index].start_offset
        return len(self._prefix) + sum(slot.full_length for slot in self._slots)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise PreconditionError(f"Section index {index} outside [0, {len(self._slots)})")

    @staticmethod
    def _check_section(section: Section) -> None:
        low, high = section.min_input_length, section.max_input_length
        if low < 1:
            raise PreconditionError(f"{section!r}: minimum input length must be positive")
        if low > high:
            raise PreconditionError(f"{section!r}: minimum input length exceeds maximum")
        default_text = section.default_text()
        if default_text is not None and not low <= len(default_text) <= high:
            raise PreconditionError(f"{section!r}: default text {default_text!r} violates its length bounds")
        accepted = section.reserved_characters_accepted()
        if accepted:
            raise PreconditionError(f"{section!r} accepts reserved characters {accepted!r}")

    def _set_current(self, index: int) -> None:
        if index != self._current_section_index:
            self._current_section_index = index
            self.current_section_index_changed.emit(index)

    def _track_cursor(self, position: int) -> None:
        spans = self._require_split(self.text())
        index = next((i for i, span in enumerate(spans) if span.contains(position)), -1)
        self._set_current(index)

    def _sync_slots(self, text: str) -> None:
        spans = self._require_split(text)
        for slot, span in zip(self._slots, spans):
            slot.text = span.text
            slot.start_offset = span.start

    def _change_text(self, text: str) -> None:
        """Replace the whole text, keeping the cursor where it was."""
        cursor = self._buffer.cursor_position()
        with self._suspend_tracking():
            self._buffer.set_text(text)
            self._buffer.set_cursor_position(cursor)
        self._sync_slots(text)
        self._track_cursor(self._buffer.cursor_position())

    @contextmanager
    def _suspend_tracking(self) -> Iterator[None]:
        self._suspended += 1
        try:
            yield
        finally:
            self._suspended -= 1

    def _on_text_changed(self, text: str) -> None:
        if self._suspended:
            return
        self._sync_slots(text)
        self._track_cursor(min(self._buffer.cursor_position(), len(text)))

    def _on_cursor_position_changed(self, old: int, new: int) -> None:
        if self._suspended:
            return
        self._track_cursor(new)
