"""ASCII character classification, case mapping and integer text conversion."""

from __future__ import annotations

from itertools import takewhile

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"


def _code(c: str | int) -> int:
    """Return the character code of a one-character string or an integer code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _wrap_int32(value: int) -> int:
    """Reduce an integer to the signed 32-bit range, two's complement style."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def isalpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def isalnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, one optional sign is read, then digits until
    the first non-digit. No digits gives 0. The result wraps to 32 bits.
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
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)