import string

import pytest

from pushswap.libft.chars import (
    atoi,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    itoa,
    tolower,
    toupper,
)


@pytest.mark.parametrize("code", range(256))
def test_classification_matches_ascii_sets(code):
    ch = chr(code)
    assert isdigit(code) == (ch in string.digits)
    assert isalpha(code) == (ch in string.ascii_letters)
    assert isalnum(code) == (ch in string.ascii_letters + string.digits)
    assert isascii(code) == (code < 128)
    assert isprint(code) == (code < 128 and ch.isprintable())


def test_classification_accepts_characters():
    assert isdigit("7")
    assert not isdigit("x")
    assert isalpha("Q")
    assert isalnum("z")
    assert not isalnum("_")
    assert isprint(" ")
    assert not isprint("\t")


def test_classification_rejects_multi_character_string():
    with pytest.raises(ValueError):
        isdigit("12")


def test_case_mapping_on_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert toupper(lower) == upper
        assert tolower(upper) == lower
        assert tolower(toupper(lower)) == lower


def test_case_mapping_keeps_other_characters():
    for ch in string.digits + string.punctuation + " ":
        assert tolower(ch) == ch
        assert toupper(ch) == ch


def test_case_mapping_on_codes_returns_codes():
    assert toupper(ord("a")) == ord("A")
    assert tolower(ord("A")) == ord("a")
    assert tolower(200) == 200


@pytest.mark.parametrize("text", ["42", "-42", "+17", "0", "2147483647", "-2147483648"])
def test_atoi_plain_numbers(text):
    assert atoi(text) == int(text)


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r-123") == int("-123")


def test_atoi_stops_at_first_non_digit():
    assert atoi("123abc456") == int("123")
    assert atoi("99 1") == int("99")


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("+-5") == 0
    assert atoi("abc") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == int("-2147483648")
    assert atoi("-2147483649") == int("2147483647")


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000000])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n
    assert int(itoa(n)) == n


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)
    with pytest.raises(OverflowError):
        itoa(-(2**31) - 1)