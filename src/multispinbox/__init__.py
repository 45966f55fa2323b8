"""Composite multi-section text editing model and its Qt spin box widget."""
from multispinbox.errors import MultiSpinBoxError, PreconditionError, ConsistencyError
from multispinbox.model import (
    Section, ValidationState, IntegerSection, BinarySection, SectionSlot,
    TextBuffer, MemoryTextBuffer, MultiSectionModel, SectionValidator,
    create_section, list_keys, register_section,
)
from multispinbox.utils import TextSpan, simplify

__version__ = "0.1.0"
