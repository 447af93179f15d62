"""Byte-buffer fill, search, comparison and copy operations."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "SIZE_MAX",
    "memset",
    "bzero",
    "calloc",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
]

SIZE_MAX = 2**64 - 1

BytesLike = "bytes | bytearray | memoryview | Sequence[int]"


def _check_count(count: int, *lengths: int) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for length in lengths:
        if count > length:
            raise IndexError(f"count {count} exceeds buffer length {length}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes of ``buffer`` with ``value`` truncated to a byte."""
    _check_count(count, len(buffer))
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes.

    Raises OverflowError when the total would not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)


def memchr(data: bytes | bytearray | memoryview | Sequence[int], value: int, count: int) -> int | None:
    """Return the index of the first byte equal to ``value`` in the first ``count`` bytes, or None."""
    _check_count(count, len(data))
    target = value & 0xFF
    return next(
        (index for index, byte in enumerate(data[:count]) if byte == target),
        None,
    )


def memcmp(
    first: bytes | bytearray | memoryview | Sequence[int],
    second: bytes | bytearray | memoryview | Sequence[int],
    count: int,
) -> int:
    """Compare the first ``count`` bytes; return the difference at the first mismatch, else 0."""
    _check_count(count, len(first), len(second))
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray | memoryview | Sequence[int], count: int) -> bytearray:
    """Copy ``count`` bytes from the start of ``src`` to the start of ``dest``."""
    _check_count(count, len(dest), len(src))
    dest[:count] = bytes(src[:count])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, len(buffer) - dest, len(buffer) - src)
    buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer