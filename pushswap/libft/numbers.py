"""Integer parsing and formatting helpers."""

from __future__ import annotations

from typing import Iterable, List

_LLONG_MAX = 2**63 - 1
_WHITESPACE = {"\t", "\n", "\v", "\f", "\r", " "}


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does, as a 32-bit int.

    Leading whitespace is skipped and one sign is accepted; a sign not
    followed by a digit gives 0. When the digits overflow a 64-bit value the
    result is -1 for a positive number and 0 for a negative one.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
        if pos >= len(text) or not text[pos].isdigit() or not text[pos].isascii():
            return 0
    number = 0
    for ch in text[pos:]:
        if not ("0" <= ch <= "9"):
            break
        candidate = number * 10 + (ord(ch) - 48)
        if candidate > _LLONG_MAX:
            return 0 if sign == -1 else -1
        number = candidate
    return _to_int32(number * sign)


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    return str(n)


def sort_int_pass(values: Iterable[int]) -> List[int]:
    """Run one bubble-sort pass and return the new list.

    Adjacent values are swapped when the left one is larger, unless the
    right-hand value is zero.
    """
    result = list(values)
    for left in range(len(result) - 1):
        right = left + 1
        if result[left] > result[right] and result[right] != 0:
            result[left], result[right] = result[right], result[left]
    return result