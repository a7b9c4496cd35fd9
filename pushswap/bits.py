"""Bit queries on 32-bit integers and their binary rendering."""

from __future__ import annotations

INT_BITS = 32
_MASK = (1 << INT_BITS) - 1


def is_set(n: int, i: int) -> bool:
    """True when bit i of n is set."""
    return bool((n >> i) & 1)


def highest_set(n: int) -> int:
    """Index of the highest set bit of n as a 32-bit integer; -1 for zero."""
    return (n & _MASK).bit_length() - 1


def format_bits(n: int) -> str:
    """Render n as 32 binary digits followed by the debug trailer line."""
    bits = format(n & _MASK, f"0{INT_BITS}b")
    status = "  is_set\n" if is_set(n, 0) else "  not_set\n"
    return f"{bits}\tHighest set is: {status}"