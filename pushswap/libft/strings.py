"""String helpers with the semantics of the classic C string routines.

Positions are returned as indexes instead of pointers, and "not found"
is returned as None.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _char(c: str | int) -> str:
    """Return a one-character string from a character or a character code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def _code_at(s: str, i: int) -> int:
    """Return the code at position i, or 0 past the end of s."""
    return ord(s[i]) if i < len(s) else 0


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strchr(s: str, c: str | int) -> int | None:
    """Return the index of the first c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Return the index of the last c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch."""
    for i in range(n):
        a = _code_at(s1, i)
        b = _code_at(s2, i)
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Return the index of needle in haystack lying wholly within the first n characters."""
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(n, 0))
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(s)


def substr(s: str, start: int, n: int) -> str:
    """Return at most n characters of s starting at start; empty if start is past the end."""
    if start < 0 or n < 0:
        raise ValueError("start and n must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + n]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    return s.strip(charset)


def split(s: str, c: str | int) -> list[str]:
    """Split s on the separator c, dropping empty words."""
    return [word for word in s.split(_char(c)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string built from f(index, char) for each character of s."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(s: MutableSequence, f: Callable[[int, MutableSequence], None]) -> MutableSequence:
    """Call f(index, s) for each position of the mutable sequence s.

    f may change s[index] in place. The number of calls is fixed by the
    length of s before the first call. Returns s.
    """
    for i in range(len(s)):
        f(i, s)
    return s


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text, truncated to size - 1 characters, and the full
    length of src. A size of 0 copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters, terminator included.

    Returns the resulting text and the length the function reports: when
    size is not larger than dest, dest is unchanged and the length is
    len(src) + size; otherwise it is len(dest) + len(src).
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dest):
        return dest, len(src) + size
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)