from multispinbox.model.sections.base import Section, ValidationState, ValidationResult
from multispinbox.model.sections.registry import register_section, create_section, list_keys
from multispinbox.model.sections.integer import IntegerSection
from multispinbox.model.sections.binary import BinarySection

__all__ = [
    "Section",
    "ValidationState",
    "ValidationResult",
    "IntegerSection",
    "BinarySection",
    "register_section",
    "create_section",
    "list_keys",
]
