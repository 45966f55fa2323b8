from multispinbox.model.sections import (
    Section, ValidationState, IntegerSection, BinarySection, create_section, list_keys, register_section
)
from multispinbox.model.slot import SectionSlot
from multispinbox.model.text_buffer import TextBuffer, MemoryTextBuffer
from multispinbox.model.composite import MultiSectionModel
from multispinbox.model.validator import SectionValidator
