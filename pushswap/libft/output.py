"""Formatted output: a small printf and helpers that write to text streams."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO, Union

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def number_in_base(nb: int, base: str) -> str:
    """Write a non-negative integer with the digits given by ``base``."""
    radix = len(base)
    if radix < 2:
        raise ValueError("a base needs at least two digits")
    if nb < 0:
        raise ValueError("number must not be negative")
    digits = []
    while True:
        nb, remainder = divmod(nb, radix)
        digits.append(base[remainder])
        if nb == 0:
            break
    return "".join(reversed(digits))


def _next_arg(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _char_of(value: Union[int, str]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    value = _next_arg(values)
    if spec == "c":
        return _char_of(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        address = 0 if value is None else value & _POINTER_MASK
        return "0x" + number_in_base(address, HEX_LOWER)
    if spec in "di":
        return str(_to_int32(value))
    base = {"u": DECIMAL, "x": HEX_LOWER, "X": HEX_UPPER}[spec]
    return number_in_base(value & _UINT_MASK, base)


def format_printf(fmt: str, *args: Any) -> str:
    """Expand the conversions %c %s %p %d %i %u %x %X and %% in ``fmt``.

    An unknown conversion produces nothing and takes no argument; a lone
    ``%`` at the end of the format ends the output.
    """
    values = iter(args)
    chars = iter(fmt)
    parts = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def putchar_fd(c: Union[int, str], stream: TextIO) -> None:
    """Write one character to ``stream``."""
    stream.write(_char_of(c))


def putstr_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` to ``stream``."""
    stream.write(text)


def putendl_fd(text: str, stream: TextIO) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    putstr_fd(text, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal form of ``n`` to ``stream``."""
    putstr_fd(str(n), stream)