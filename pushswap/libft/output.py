"""Write characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from pushswap.libft.chars import itoa


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character, given as a string or a character code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    else:
        ch = chr(c)
    _stream(stream).write(ch)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write a string as it is."""
    _stream(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    out = _stream(stream)
    out.write(s)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of a signed 32-bit integer."""
    _stream(stream).write(itoa(n))