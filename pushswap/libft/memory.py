"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations


def _check_span(buf, n: int, offset: int = 0) -> None:
    """Raise IndexError unless buf[offset:offset + n] lies inside buf."""
    if n < 0 or offset < 0 or offset + n > len(buf):
        raise IndexError(
            f"span of {n} bytes at offset {offset} exceeds buffer of {len(buf)} bytes"
        )


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c; return buf."""
    _check_span(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf; return buf."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest; return dest."""
    _check_span(dest, n)
    _check_span(src, n)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes inside buf from src_offset to dest_offset, overlap allowed."""
    _check_span(buf, n, dest_offset)
    _check_span(buf, n, src_offset)
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(buf: bytes, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to c among the first n, or None."""
    _check_span(buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: bytes, s2: bytes, n: int) -> int:
    """Compare the first n bytes; return the difference at the first mismatch or 0."""
    _check_span(s1, n)
    _check_span(s2, n)
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return a - b
    return 0