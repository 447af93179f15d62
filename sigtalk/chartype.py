"""Classification and case conversion of single ASCII character codes."""

from __future__ import annotations

__all__ = [
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "tolower",
    "toupper",
]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_ASCII = range(0, 128)
_PRINTABLE = range(ord(" "), ord("~") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def isalpha(code: int) -> bool:
    """Return True if ``code`` is an ASCII letter."""
    return code in _UPPER or code in _LOWER


def isdigit(code: int) -> bool:
    """Return True if ``code`` is an ASCII decimal digit."""
    return code in _DIGITS


def isalnum(code: int) -> bool:
    """Return True if ``code`` is an ASCII letter or digit."""
    return isalpha(code) or isdigit(code)


def isascii(code: int) -> bool:
    """Return True if ``code`` lies in the 7-bit ASCII range."""
    return code in _ASCII


def isprint(code: int) -> bool:
    """Return True if ``code`` is a printable ASCII character, space included."""
    return code in _PRINTABLE


def tolower(code: int) -> int:
    """Map an ASCII upper-case letter to lower case; leave anything else as is."""
    return code + _CASE_OFFSET if code in _UPPER else code


def toupper(code: int) -> int:
    """Map an ASCII lower-case letter to upper case; leave anything else as is."""
    return code - _CASE_OFFSET if code in _LOWER else code