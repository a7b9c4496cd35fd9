"""Parsing and checking of the integer tokens given on the command line."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import takewhile

from pushswap.libft.chars import INT_MAX, INT_MIN, isdigit

_WHITESPACE = " \t\n\v\f\r"
_LONG_MIN = -(2**63)


class InputError(ValueError):
    """Raised when the input cannot form a stack of distinct integers."""


def _wrap_long(value: int) -> int:
    return (value - _LONG_MIN) % 2**64 + _LONG_MIN


def parse_long(text: str) -> int:
    """Parse a leading decimal integer into a 64-bit signed value.

    Leading whitespace is skipped, one optional sign is read, then digits
    until the first non-digit. No digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = "".join(takewhile(isdigit, rest))
    value = int(digits) if digits else 0
    return _wrap_long(sign * value)


def _is_lone_sign(token: str) -> bool:
    return token in ("+", "-")


def _has_number_format(token: str) -> bool:
    if not token:
        return False
    body = token[1:] if token[0] in "+-" else token
    return all(isdigit(ch) for ch in body)


def is_valid_token(token: str, existing: Iterable[int] = ()) -> bool:
    """True when token is a signed 32-bit integer not already in existing."""
    if _is_lone_sign(token):
        return False
    if not _has_number_format(token):
        return False
    n = parse_long(token)
    if not INT_MIN <= n <= INT_MAX:
        return False
    return n not in existing