"""Writing characters, strings and integers straight to file descriptors."""

from __future__ import annotations

import os

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(char: str, fd: int) -> None:
    """Write the single character ``char`` to ``fd``."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _write_all(fd, char.encode())


def putstr_fd(text: str, fd: int) -> None:
    """Write ``text`` to ``fd``."""
    _write_all(fd, text.encode())


def putendl_fd(text: str, fd: int) -> None:
    """Write ``text`` followed by a newline to ``fd``."""
    _write_all(fd, text.encode() + b"\n")


def putnbr_fd(number: int, fd: int) -> None:
    """Write the decimal form of ``number`` to ``fd``."""
    _write_all(fd, str(number).encode("ascii"))