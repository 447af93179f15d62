"""String conversion, splitting, joining, trimming and mapping helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import TypeVar

__all__ = [
    "atoi",
    "itoa",
    "split",
    "strdup",
    "striteri",
    "strjoin",
    "strmapi",
    "strtrim",
    "substr",
]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_INT_BITS = 32

T = TypeVar("T")


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer with two's-complement wraparound."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and one optional sign is accepted. Parsing
    stops at the first non-digit; if no digits follow, the result is 0. The
    value wraps around like a 32-bit signed integer.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    start = position
    while position < length and text[position] in _DIGITS:
        position += 1
    digits = text[start:position]
    magnitude = int(digits) if digits else 0
    return _wrap_int(sign * magnitude)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(number)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on the single character ``separator``, dropping empty words."""
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    return [word for word in text.split(separator) if word]


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def striteri(buffer: MutableSequence[T], func: Callable[[int, T], T]) -> None:
    """Replace each item of ``buffer`` in place with ``func(index, item)``."""
    for index, item in enumerate(buffer):
        buffer[index] = func(index, item)


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not isinstance(text, str) or not isinstance(charset, str):
        raise TypeError("text and charset must both be strings")
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A ``start`` past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]