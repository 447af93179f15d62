"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

__all__ = ["render", "printf"]

_INT_BITS = 32
_POINTER_BITS = 64
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"
_POINTER_PREFIX = "0x"
_SURROGATE_BASE = 0xDC00
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _signed(value: int) -> int:
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _unsigned(value: int) -> int:
    return value % (1 << _INT_BITS)


def _byte_char(code: int) -> str:
    """Return the character standing for one raw byte.

    Bytes outside ASCII are kept as surrogate escapes so that writing the
    text back out reproduces the byte exactly.
    """
    byte = code & 0xFF
    return chr(byte) if byte < 0x80 else chr(_SURROGATE_BASE + byte)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return _byte_char(_require_int(value, "c"))


def _format_string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode(_ENCODING, _ERRORS)
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if value is None or value == 0:
        return _NULL_POINTER
    address = value if isinstance(value, int) else id(value)
    return f"{_POINTER_PREFIX}{address % (1 << _POINTER_BITS):x}"


def _format_decimal(value: Any) -> str:
    return str(_signed(_require_int(value, "d")))


def _format_unsigned(value: Any) -> str:
    return str(_unsigned(_require_int(value, "u")))


def _format_hex_lower(value: Any) -> str:
    return f"{_unsigned(_require_int(value, 'x')):x}"


def _format_hex_upper(value: Any) -> str:
    return f"{_unsigned(_require_int(value, 'X')):X}"


_FORMATTERS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": _format_decimal,
    "i": _format_decimal,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def render(template: str | None, *args: Any) -> str:
    """Expand the conversions in ``template`` with ``args`` and return the text.

    Integers wrap to 32 bits as C ``int`` and ``unsigned int`` would. An
    unknown conversion character is dropped without consuming an argument,
    a lone ``%`` at the end is ignored, and extra arguments are ignored.
    Raises TypeError when the template needs more arguments than given.
    """
    if template is None:
        return ""
    pieces: list[str] = []
    values = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        formatter = _FORMATTERS.get(spec)
        if formatter is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec} in {template!r}") from None
        pieces.append(formatter(value))
    return "".join(pieces)


def printf(template: str | None, *args: Any) -> int:
    """Write the expanded ``template`` to standard output; return the number of bytes written."""
    data = render(template, *args).encode(_ENCODING, _ERRORS)
    view = memoryview(data)
    while view:
        written = os.write(1, view)
        view = view[written:]
    return len(data)