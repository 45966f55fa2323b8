import pytest

from multispinbox.model.sections import (
    BinarySection, IntegerSection, Section, ValidationState, create_section, list_keys, register_section
)
from multispinbox.model.sections import registry

ACCEPTABLE = ValidationState.ACCEPTABLE
INTERMEDIATE = ValidationState.INTERMEDIATE
INVALID = ValidationState.INVALID


# ---- IntegerSection ----

def test_integer_fixed_width_bounds():
    section = IntegerSection(0, 99, width=2)
    assert (section.min_input_length, section.max_input_length) == (2, 2)
    assert section.default_text() == "00"


def test_integer_variable_width_bounds():
    assert (IntegerSection(0, 255).min_input_length, IntegerSection(0, 255).max_input_length) == (1, 3)
    negative = IntegerSection(-50, -10)
    assert (negative.min_input_length, negative.max_input_length) == (1, 3)
    assert negative.default_value() == -10


@pytest.mark.parametrize("text, state", [
    ("12", ACCEPTABLE),
    ("", INTERMEDIATE),
    ("1", INTERMEDIATE),
    ("1a", INVALID),
    ("-1", INVALID),
    ("123", INVALID),
])
def test_integer_validate_fixed_width(text, state):
    assert IntegerSection(0, 99, width=2).validate(text, -1)[0] == state


def test_integer_validate_rejects_prefix_that_cannot_complete():
    hours = IntegerSection(0, 23, width=2)
    assert hours.validate("2", -1)[0] == INTERMEDIATE
    assert hours.validate("3", -1)[0] == INVALID
    assert hours.validate("24", -1)[0] == INVALID


def test_integer_validate_negative_range():
    section = IntegerSection(-50, -10)
    assert section.validate("-", -1)[0] == INTERMEDIATE
    assert section.validate("-5", -1)[0] == INTERMEDIATE
    assert section.validate("-20", -1)[0] == ACCEPTABLE
    assert section.validate("-60", -1)[0] == INVALID
    assert section.validate("5", -1)[0] == INVALID


def test_integer_validate_overwrites_when_typing_into_full_field():
    assert IntegerSection(0, 99, width=2).validate("123", 1) == (ACCEPTABLE, "13", 1)
    assert IntegerSection(0, 99, width=2).validate("123", 2) == (ACCEPTABLE, "12", 2)


def test_integer_codec():
    section = IntegerSection(0, 99, width=2)
    assert section.text_from_value(7) == "07"
    assert section.value_from_text("07") == 7
    assert section.value_from_text("") is None
    assert section.value_from_text("1a") is None
    assert section.text_from_value(100) is None
    assert section.text_from_value("7") is None
    assert section.text_from_value(True) is None


def test_integer_round_trip():
    for section in (IntegerSection(0, 99, width=2), IntegerSection(-50, 50), IntegerSection(-50, -10)):
        for value in range(section.minimum, section.maximum + 1):
            assert section.value_from_text(section.text_from_value(value)) == value


def test_integer_step_clamps():
    section = IntegerSection(0, 99)
    assert section.step_by(98, 5) == 99
    assert section.step_by(1, -5) == 0
    assert section.step_by(None, 3) == 3


def test_integer_step_wraps():
    minutes = IntegerSection(0, 59, width=2, wrapping=True)
    assert minutes.step_by(59, 1) == 0
    assert minutes.step_by(0, -1) == 59
    assert minutes.step_by(30, 120) == 30


@pytest.mark.parametrize("kwargs", [
    dict(minimum=5, maximum=1),
    dict(minimum=-1, maximum=5, width=2),
    dict(minimum=0, maximum=999, width=2),
    dict(minimum=0, maximum=9, default=10),
])
def test_integer_rejects_bad_configuration(kwargs):
    with pytest.raises(ValueError):
        IntegerSection(**kwargs)


# ---- BinarySection ----

@pytest.mark.parametrize("text, pos, expected", [
    ("1010", -1, (ACCEPTABLE, "1010", -1)),
    ("101", -1, (INTERMEDIATE, "101", -1)),
    ("1012", -1, (INVALID, "1012", -1)),
    ("10101", -1, (INVALID, "10101", -1)),
    ("10101", 2, (ACCEPTABLE, "1001", 2)),
])
def test_binary_validate(text, pos, expected):
    assert BinarySection(4).validate(text, pos) == expected


def test_binary_codec():
    section = BinarySection(4)
    assert section.default_text() == "0000"
    assert section.value_from_text("1010") == 10
    assert section.value_from_text("10a0") is None
    assert section.text_from_value(5) == "0101"
    assert section.text_from_value(16) is None
    assert section.text_from_value(-1) is None
    for value in range(16):
        assert section.value_from_text(section.text_from_value(value)) == value


def test_binary_step_flips_low_bit_with_carry():
    section = BinarySection(4)
    assert section.step_by(0b0101, 1) == 0b0110
    assert section.step_by(0b0110, 1) == 0b0111
    assert section.step_by(15, 1) == 0
    assert section.step_by(0, -1) == 15


def test_binary_rejects_bad_configuration():
    with pytest.raises(ValueError):
        BinarySection(0)
    with pytest.raises(ValueError):
        BinarySection(2, default=4)


def test_builtin_sections_accept_no_reserved_character():
    assert IntegerSection(-9, 9).reserved_characters_accepted() == []
    assert BinarySection().reserved_characters_accepted() == []


def test_base_section_is_abstract():
    with pytest.raises(NotImplementedError):
        Section().validate("", 0)


# ---- registry ----

def test_registry_creates_sections_by_key():
    assert {"integer", "binary"} <= set(list_keys())
    section = create_section("binary", width=3)
    assert isinstance(section, BinarySection)
    assert section.default_text() == "000"
    assert isinstance(create_section("integer", minimum=1, maximum=12), IntegerSection)


def test_registry_unknown_key():
    with pytest.raises(KeyError):
        create_section("roman")


def test_registry_requires_key():
    class Nameless(Section):
        pass

    with pytest.raises(ValueError):
        register_section(Nameless)


def test_registry_accepts_new_variant():
    class Octal(IntegerSection):
        KEY = "octal-test"

    try:
        register_section(Octal)
        assert isinstance(create_section("octal-test", minimum=0, maximum=7), Octal)
    finally:
        registry._REGISTRY.pop("octal-test", None)
