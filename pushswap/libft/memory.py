"""Byte-buffer operations on ``bytearray`` and bytes-like objects."""

from __future__ import annotations

import sys
from typing import Optional

SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(buffer, n: int) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > len(buffer):
        raise IndexError(f"length {n} exceeds buffer of {len(buffer)} bytes")


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to zero, in place."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total size does not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count != 0 and SIZE_MAX // count < size:
        raise OverflowError("requested allocation is too large")
    return bytearray(count * size)


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Offset of the first byte equal to ``c`` within the first ``n`` bytes, or None."""
    _check_length(data, n)
    offset = bytes(data).find(bytes([c & 0xFF]), 0, n)
    return None if offset < 0 else offset


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Difference of the first differing byte among the first ``n``, or 0."""
    _check_length(first, n)
    _check_length(second, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_length(dst, n)
    _check_length(src, n)
    dst[:n] = src[:n]
    return dst


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer``; overlapping regions are handled."""
    if min(dst_offset, src_offset, n) < 0:
        raise ValueError("offsets and length must not be negative")
    if max(dst_offset, src_offset) + n > len(buffer):
        raise IndexError("move runs past the end of the buffer")
    buffer[dst_offset:dst_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``c`` truncated to a byte."""
    _check_length(buffer, n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer