"""Command-line entry point: read integers, print the instructions that sort them."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.mapping import set_indexes
from pushswap.sorting import (
    is_sorted,
    sort_four_five,
    sort_six_more,
    sort_three,
    sort_two,
)
from pushswap.stacks import Stack
from pushswap.validation import InputError, is_valid_token, parse_long


def _tokens(arg: str) -> list[str]:
    """Split an argument holding spaces into its words; keep any other argument whole."""
    if " " not in arg:
        return [arg]
    words = [word for word in arg.split(" ") if word]
    if not words:
        raise InputError(f"argument {arg!r} holds no numbers")
    return words


def build_stack(args: Iterable[str]) -> list[int]:
    """Turn command-line arguments into the list of values for stack a.

    An argument containing spaces is split into several numbers. Raises
    InputError for anything that is not a distinct signed 32-bit integer.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        for token in _tokens(arg):
            if not is_valid_token(token, seen):
                raise InputError(f"invalid value {token!r}")
            n = parse_long(token)
            values.append(n)
            seen.add(n)
    return values


def solve(values: Sequence[int]) -> list[str]:
    """Return the instructions that sort values, smallest on top of stack a."""
    if len(set(values)) != len(values):
        raise InputError("values must be distinct")
    if not values:
        return []
    instructions: list[str] = []
    a = Stack("a", values, log=instructions.append)
    b = Stack("b", log=instructions.append)
    if is_sorted(a):
        return instructions
    size = len(values)
    if size == 2:
        sort_two(a)
    elif size == 3:
        sort_three(a)
    elif size in (4, 5):
        sort_four_five(a, b)
    else:
        set_indexes(a)
        sort_six_more(a, b)
    return instructions


def main(argv: Sequence[str] | None = None) -> int:
    """Print one instruction per line; report "Error" on standard error for bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = build_stack(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for instruction in solve(values):
        print(instruction)
    return 0


if __name__ == "__main__":
    sys.exit(main())