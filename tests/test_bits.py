import pytest

from pushswap.bits import format_bits, highest_set, is_set


def test_is_set_low_bits():
    assert is_set(5, 0) is True
    assert is_set(5, 1) is False
    assert is_set(5, 2) is True


def test_is_set_negative_top_bit():
    assert is_set(-1, 31) is True


def test_highest_set_zero():
    assert highest_set(0) == -1


def test_highest_set_one():
    assert highest_set(1) == 0


def test_highest_set_negative():
    assert highest_set(-1) == 31


@pytest.mark.parametrize("n", list(range(1, 600)) + [2**30, 2**31 - 1])
def test_highest_set_brackets_value(n):
    h = highest_set(n)
    assert 2**h <= n < 2 ** (h + 1)
    assert is_set(n, h)


def test_format_bits_layout():
    line = format_bits(5)
    bits = line[:32]
    assert set(bits) <= {"0", "1"}
    assert int(bits, 2) == 5
    assert line[32:].startswith("\tHighest set is: ")
    assert line.endswith("  is_set\n")


def test_format_bits_even_is_not_set():
    assert format_bits(4).endswith("  not_set\n")


def test_format_bits_negative_uses_twos_complement():
    assert format_bits(-1)[:32] == "1" * 32


@pytest.mark.parametrize("n", [0, 1, 42, 2147483647])
def test_format_bits_round_trip(n):
    assert int(format_bits(n)[:32], 2) == n