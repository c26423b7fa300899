"""Validation of command-line numbers and computation of their ranks."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from pushswap.libft.chars import is_digit
from pushswap.libft.strings import split

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = frozenset("\t\n\v\f\r ")


class InputError(ValueError):
    """Raised when the arguments do not describe a list of distinct ints."""


def parse_int(text: str) -> int:
    """Parse a leading decimal integer without any range limit.

    Leading whitespace is skipped and one sign is accepted. A sign that is
    not directly followed by a digit gives 0, as does text with no digits.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
        if pos >= len(text) or not is_digit(text[pos]):
            return 0
    number = 0
    for ch in text[pos:]:
        if not is_digit(ch):
            break
        number = number * 10 + (ord(ch) - 48)
    return number * sign


def is_valid_token(token: str) -> bool:
    """True for an optionally signed run of digits that fits in a 32-bit int."""
    digits = token[1:] if token[:1] in ("+", "-") else token
    if not digits or not all(is_digit(ch) for ch in digits):
        return False
    return INT_MIN <= parse_int(token) <= INT_MAX


def validate_arguments(args: Iterable[str]) -> List[str]:
    """Check every argument and return the space-separated tokens they hold.

    An empty argument or an invalid token raises InputError.
    """
    tokens: List[str] = []
    for arg in args:
        if arg == "":
            raise InputError("empty argument")
        for token in split(arg, " "):
            if not is_valid_token(token):
                raise InputError(f"invalid number: {token!r}")
            tokens.append(token)
    return tokens


def parse_arguments(args: Iterable[str]) -> List[int]:
    """Validate the arguments and return the numbers they hold, in order."""
    return [parse_int(token) for token in validate_arguments(args)]


def assign_ranks(values: Sequence[int]) -> List[int]:
    """Rank of each value: how many of the values are smaller than it.

    Raises InputError when a value occurs more than once.
    """
    if len(set(values)) != len(values):
        raise InputError("duplicate numbers")
    order = {value: rank for rank, value in enumerate(sorted(values))}
    return [order[value] for value in values]