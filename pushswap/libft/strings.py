"""String helpers: searching, copying, splitting, trimming and mapping.

Positions are returned as indices into the string, or ``None`` where
nothing is found. As with NUL-terminated strings, the terminator ``"\\0"``
is found at the end of any string.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def split(text: str, sep: CharLike) -> List[str]:
    """Split ``text`` on the separator character, dropping empty words."""
    separator = _char(sep)
    return [word for word in text.split(separator) if word]


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``text``, or None."""
    wanted = _char(c)
    pos = text.find(wanted)
    if pos >= 0:
        return pos
    return len(text) if wanted == _NUL else None


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``text``, or None."""
    wanted = _char(c)
    if wanted == _NUL:
        return len(text)
    pos = text.rfind(wanted)
    return None if pos < 0 else pos


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def striteri(chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Apply ``func(index, char)`` to each character of ``chars`` in place.

    A returned character replaces the current one; ``None`` keeps it.
    """
    for index, ch in enumerate(list(chars)):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full result would
    have had, as the bounded-concatenation contract specifies.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dest, len(src)
    if len(dest) >= size:
        return dest, len(src) + size
    room = size - len(dest) - 1
    return dest + src[:room], len(src) + len(dest)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied string and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the result's sign gives the order."""
    if n < 0:
        raise ValueError("n must not be negative")
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of ``needle`` within the first ``n`` characters of ``haystack``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if not needle:
        return 0
    if n == 0:
        return None
    pos = haystack[:n].find(needle)
    return None if pos < 0 else pos


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the string gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]