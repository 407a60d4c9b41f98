import pytest

from loto.errors import (
    DuplicateNumbersError,
    InvalidCountError,
    InvalidPersonalIdError,
    InvalidRangeError,
    MissingOrInvalidNumbersError,
)
from loto.validation import NumberRules, validate_draw_input, validate_ticket_input


def test_accepts_comma_separated_string():
    data = validate_ticket_input("AB123456", " 7, 1,45 ,3,22,9 ")
    assert data.personal_id == "AB123456"
    assert data.numbers == (7, 1, 45, 3, 22, 9)


def test_accepts_list_and_keeps_order():
    data = validate_ticket_input("x1", [10, 9, 8, 7, 6, 5, 4, 3, 2, 1])
    assert data.numbers == (10, 9, 8, 7, 6, 5, 4, 3, 2, 1)


def test_blank_tokens_are_dropped():
    data = validate_ticket_input("x1", "1,2,,3,4,5,6,")
    assert data.numbers == (1, 2, 3, 4, 5, 6)


@pytest.mark.parametrize("personal_id", ["", None, "A" * 21, "AB-123", "ab 12", "čšž1", 12345])
def test_rejects_bad_personal_id(personal_id):
    with pytest.raises(InvalidPersonalIdError):
        validate_ticket_input(personal_id, "1,2,3,4,5,6")


def test_personal_id_at_max_length():
    assert validate_ticket_input("A" * 20, "1,2,3,4,5,6").personal_id == "A" * 20


@pytest.mark.parametrize("numbers", ["1,2,3,4,5", "1,2,3,4,5,6,7,8,9,10,11", "", [], 123456, None])
def test_rejects_wrong_count(numbers):
    with pytest.raises(InvalidCountError):
        validate_ticket_input("AB1", numbers)


@pytest.mark.parametrize(
    "numbers",
    ["1,2,3,4,5,46", "0,1,2,3,4,5", "1,2,3,4,5,6.5", "1,2,3,4,5,abc", [1, 2, 3, 4, 5, True], [1, 2, 3, 4, 5, None]],
)
def test_rejects_out_of_range_or_non_integral(numbers):
    with pytest.raises(InvalidRangeError):
        validate_ticket_input("AB1", numbers)


def test_integral_float_is_accepted():
    assert validate_ticket_input("AB1", "1,2,3,4,5,6.0").numbers == (1, 2, 3, 4, 5, 6)


def test_rejects_duplicates():
    with pytest.raises(DuplicateNumbersError) as exc_info:
        validate_ticket_input("AB1", [1, 1, 2, 3, 4, 5])
    assert exc_info.value.details == {"duplicates": [1]}


def test_first_failing_rule_wins():
    # bad personal id beats bad numbers
    with pytest.raises(InvalidPersonalIdError):
        validate_ticket_input("", "1,1")
    # count beats range
    with pytest.raises(InvalidCountError):
        validate_ticket_input("AB1", "99,98")
    # range beats duplicates
    with pytest.raises(InvalidRangeError):
        validate_ticket_input("AB1", "1,1,2,3,4,99")


def test_custom_rules():
    rules = NumberRules(min_count=3, max_count=3, min_value=1, max_value=5)
    assert validate_ticket_input("AB1", "5,4,3", rules).numbers == (5, 4, 3)
    with pytest.raises(InvalidRangeError):
        validate_ticket_input("AB1", "6,4,3", rules)


def test_rules_from_config():
    rules = NumberRules.from_config({"TICKET_MIN_NUMBERS": 5, "TICKET_MAX_NUMBERS": 7, "NUMBER_MAX": 49})
    assert rules == NumberRules(min_count=5, max_count=7, min_value=1, max_value=49)


def test_draw_shape_mode_accepts_any_integers():
    assert validate_draw_input([99, 3, 3]).numbers == (99, 3, 3)


@pytest.mark.parametrize("numbers", [None, "1,2,3", [1, "2"], [1, 2.5], [True, 2], {"a": 1}])
def test_draw_shape_mode_rejects_non_integer_lists(numbers):
    with pytest.raises(MissingOrInvalidNumbersError):
        validate_draw_input(numbers)


def test_draw_strict_mode_applies_ticket_rules():
    assert validate_draw_input([4, 8, 15, 16, 23, 42], mode="strict").numbers == (4, 8, 15, 16, 23, 42)
    with pytest.raises(InvalidRangeError):
        validate_draw_input([4, 8, 15, 16, 23, 46], mode="strict")
    with pytest.raises(DuplicateNumbersError):
        validate_draw_input([4, 4, 15, 16, 23, 42], mode="strict")
    with pytest.raises(InvalidCountError):
        validate_draw_input([1, 2, 3], mode="strict")


def test_draw_unknown_mode():
    with pytest.raises(ValueError):
        validate_draw_input([1, 2, 3, 4, 5, 6], mode="lenient")


@pytest.mark.parametrize("token", ["1_0", "٥", "1e1", "0x10", "7.5", "+"])
def test_only_plain_ascii_integers_are_numbers(token):
    with pytest.raises(InvalidRangeError) as exc_info:
        validate_ticket_input("AB1", f"{token},2,3,4,6,7")
    assert exc_info.value.details == {"invalid": [token]}


def test_signed_and_zero_fraction_tokens():
    assert validate_ticket_input("AB1", "+1,2.00,3,4,5,6").numbers == (1, 2, 3, 4, 5, 6)


def test_personal_id_with_trailing_newline():
    with pytest.raises(InvalidPersonalIdError):
        validate_ticket_input("AB1\n", "1,2,3,4,5,6")


def test_draw_shape_mode_accepts_empty_list():
    assert validate_draw_input([]).numbers == ()


def test_draw_strict_mode_rejects_empty_list():
    with pytest.raises(InvalidCountError):
        validate_draw_input([], mode="strict")
