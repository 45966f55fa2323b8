import pytest

from multispinbox.errors import ConsistencyError, PreconditionError
from multispinbox.model import Section, ValidationState
from multispinbox.utils import TextSpan


def test_check_and_split(clock_model):
    assert clock_model.check_and_split("[12:34") == [TextSpan(1, "12"), TextSpan(4, "34")]
    assert clock_model.check_and_split("[:") == [TextSpan(1, ""), TextSpan(2, "")]


@pytest.mark.parametrize("text", ["12:34", "(12:34", "[1234", ""])
def test_check_and_split_rejects_layout_mismatch(clock_model, text):
    assert clock_model.check_and_split(text) is None


def test_check_and_split_rejects_trailing_text(clock_model):
    clock_model.set_suffix_of(1, "]")
    assert clock_model.check_and_split("[12:34]") == [TextSpan(1, "12"), TextSpan(4, "34")]
    assert clock_model.check_and_split("[12:34]x") is None


def test_extra_delimiter_lands_in_last_section(clock_model):
    spans = clock_model.check_and_split("[12:34:56")
    assert spans[-1] == TextSpan(4, "34:56")
    state, _, _ = clock_model.validate("[12:34:56", 0)
    assert state == ValidationState.INVALID


def test_text_index(clock_model):
    assert clock_model.text_index("[12:34", 0) == 1
    assert clock_model.text_index("[12:34", 1) == 4
    assert clock_model.text_index("[12:34", 2) == 6


def test_text_index_with_closing_suffix(clock_model):
    clock_model.set_suffix_of(1, "]")
    assert clock_model.text_index("[12:34]", 2) == 7


def test_text_index_mismatch(clock_model):
    assert clock_model.text_index("(12:34", 0) == -1
    assert clock_model.text_index("[1234", 1) == -1


def test_text_index_out_of_range(clock_model):
    with pytest.raises(PreconditionError):
        clock_model.text_index("[12:34", 3)
    with pytest.raises(PreconditionError):
        clock_model.text_index("[12:34", -1)


@pytest.mark.parametrize("text, pos, expected", [
    ("[12:34", 3, ValidationState.ACCEPTABLE),
    ("[1:34", 2, ValidationState.INTERMEDIATE),
    ("[:34", 1, ValidationState.INTERMEDIATE),
    ("[1a:34", 3, ValidationState.INVALID),
    ("(12:34", 1, ValidationState.INVALID),
    ("[12-34", 3, ValidationState.INVALID),
])
def test_validate_state(clock_model, text, pos, expected):
    state, new_text, new_pos = clock_model.validate(text, pos)
    assert state == expected
    if state != ValidationState.ACCEPTABLE:
        assert (new_text, new_pos) == (text, pos)


def test_validate_repairs_section_under_cursor(clock_model):
    assert clock_model.validate("[123:45", 2) == (ValidationState.ACCEPTABLE, "[13:45", 2)
    assert clock_model.validate("[12:345", 5) == (ValidationState.ACCEPTABLE, "[12:35", 5)


def test_validate_does_not_repair_away_from_cursor(clock_model):
    state, text, _ = clock_model.validate("[123:45", 6)
    assert state == ValidationState.INVALID
    assert text == "[123:45"


def test_validate_is_idempotent(clock_model):
    state, text, pos = clock_model.validate("[123:45", 2)
    assert clock_model.validate(text, pos) == (state, text, pos)


def test_validate_does_not_touch_the_model(clock_model):
    clock_model.validate("[123:45", 2)
    assert clock_model.text() == "[00:00"


def test_text_at(clock_model):
    assert clock_model.text_at("[12:34", 0) == "12"
    assert clock_model.text_at("[12:34", 1) == "34"


def test_set_text_at(clock_model):
    assert clock_model.set_text_at("[12:34", 0, "7") == "[7:34"
    assert clock_model.set_text_at("[12:34", 1, "") == "[12:"


def test_text_at_errors(clock_model):
    with pytest.raises(ConsistencyError):
        clock_model.text_at("12:34", 0)
    with pytest.raises(ConsistencyError):
        clock_model.set_text_at("[1234", 0, "1")
    with pytest.raises(PreconditionError):
        clock_model.text_at("[12:34", 2)
    with pytest.raises(PreconditionError):
        clock_model.set_text_at("[12:34", -1, "1")


def test_consistency_error_is_runtime_error(clock_model):
    with pytest.raises(RuntimeError):
        clock_model.text_at("", 0)


class ShoutSection(Section):
    """Upper-cases its text and doubles a single letter, so every validate rewrites."""
    KEY = "shout-test"

    @property
    def min_input_length(self):
        return 1

    @property
    def max_input_length(self):
        return 2

    def acceptable_char(self, char):
        return char.isalpha() and char.isascii()

    def validate(self, text, pos):
        if not all(self.acceptable_char(c) for c in text) or len(text) > 2:
            return ValidationState.INVALID, text, pos
        text = text.upper()
        if len(text) == 1:
            text *= 2
        return ValidationState.ACCEPTABLE, text, pos

    def default_value(self):
        return "AA"

    def text_from_value(self, value):
        return value


@pytest.fixture
def shout_model(model):
    model.set_prefix("<")
    model.insert_section(0, ShoutSection(), "-")
    model.insert_section(1, ShoutSection(), "-")
    model.insert_section(2, ShoutSection())
    return model


def test_validate_splices_every_rewritten_section(shout_model):
    assert shout_model.text() == "<AA-AA-AA"
    # Growth before the cursor shifts it, the section under it is rewritten in place
    assert shout_model.validate("<a-bc-d", 6) == (ValidationState.ACCEPTABLE, "<AA-BC-DD", 7)
    assert shout_model.validate("<a-bc-dd", 4) == (ValidationState.ACCEPTABLE, "<AA-BC-DD", 5)


def test_validate_leaves_cursor_before_rewrites_alone(shout_model):
    assert shout_model.validate("<ab-c-d", 2) == (ValidationState.ACCEPTABLE, "<AB-CC-DD", 2)


def test_validate_multi_rewrite_is_idempotent(shout_model):
    state, text, pos = shout_model.validate("<a-bc-d", 6)
    assert shout_model.validate(text, pos) == (state, text, pos)
