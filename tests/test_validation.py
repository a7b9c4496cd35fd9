import pytest

from pushswap.validation import InputError, is_valid_token, parse_long


@pytest.mark.parametrize("text", ["42", "-42", "+17", "0", "-2147483648"])
def test_parse_long_plain_numbers(text):
    assert parse_long(text) == int(text)


def test_parse_long_skips_leading_whitespace():
    assert parse_long(" \t\n-42") == -42


def test_parse_long_stops_at_non_digit():
    assert parse_long("+17abc") == 17


def test_parse_long_no_digits_is_zero():
    assert parse_long("abc") == 0
    assert parse_long("") == 0
    assert parse_long("-") == 0


@pytest.mark.parametrize("token", ["42", "-42", "+0", "0", "007", "2147483647", "-2147483648"])
def test_valid_tokens(token):
    assert is_valid_token(token, []) is True


@pytest.mark.parametrize(
    "token",
    ["", "+", "-", "12a", " 5", "--5", "+-5", "2147483648", "-2147483649", "1 2"],
)
def test_invalid_tokens(token):
    assert is_valid_token(token, []) is False


def test_duplicate_is_invalid():
    assert is_valid_token("42", [1, 42]) is False
    assert is_valid_token("+42", [42]) is False
    assert is_valid_token("0", [0]) is False


def test_distinct_from_existing_is_valid():
    assert is_valid_token("43", [1, 42]) is True


def test_default_existing_is_empty():
    assert is_valid_token("5") is True


def test_input_error_carries_message():
    error = InputError("Error")
    assert str(error) == "Error"
    assert isinstance(error, ValueError)