"""Length, search, comparison and bounded copy helpers for strings."""

from __future__ import annotations

from itertools import zip_longest

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strnstr",
    "strncmp",
    "strlcpy",
    "strlcat",
]

_NUL = "\0"


def _as_char(char: str | int) -> str:
    """Normalise ``char`` to a one-character string.

    Integer codes are truncated to a byte, as a C ``char`` conversion would.
    """
    if isinstance(char, int):
        return chr(char & 0xFF)
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strchr(text: str, char: str | int) -> int | None:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    target = _as_char(char)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: str | int) -> int | None:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    target = _as_char(char)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index where ``needle`` lies wholly within the first ``length`` characters.

    An empty ``needle`` always matches at index 0; no match gives None.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the code difference at the first mismatch, a shorter string
    comparing as if padded with NUL, or 0 when the prefixes agree.
    """
    _check_non_negative("count", count)
    for left, right in zip_longest(first[:count], second[:count], fillvalue=_NUL):
        if left != right:
            return ord(left) - ord(right)
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the text that fits and the full length of ``src``, so truncation
    happened when the length is not smaller than ``size``.
    """
    _check_non_negative("size", size)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters including the terminator.

    Returns the resulting text and the length the full result would have had.
    When ``dst`` already fills the buffer it is left unchanged and the length
    reported is ``size + len(src)``.
    """
    _check_non_negative("size", size)
    dst_length = len(dst)
    if dst_length >= size:
        return dst, size + len(src)
    return dst + src[:size - dst_length - 1], dst_length + len(src)