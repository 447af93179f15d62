"""Bit-level encoding used to carry bytes over two user signals.

Each byte travels as eight bits, least significant first. A one bit is
sent as SIGUSR1 and a zero bit as SIGUSR2.
"""

from __future__ import annotations

import signal
from collections.abc import Iterator

__all__ = [
    "BITS_PER_BYTE",
    "ONE_SIGNAL",
    "ZERO_SIGNAL",
    "char_to_bits",
    "message_bits",
    "signal_for_bit",
    "BitDecoder",
]

BITS_PER_BYTE = 8
ONE_SIGNAL = signal.SIGUSR1
ZERO_SIGNAL = signal.SIGUSR2
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def char_to_bits(byte: int) -> tuple[int, ...]:
    """Return the eight bits of ``byte``, least significant first.

    Values from -128 to 255 are accepted; negative values are taken as a
    signed char and use their two's-complement bit pattern.
    """
    if not -128 <= byte <= 255:
        raise ValueError(f"byte must lie between -128 and 255, got {byte}")
    value = byte & 0xFF
    return tuple((value >> position) & 1 for position in range(BITS_PER_BYTE))


def message_bits(message: str | bytes) -> Iterator[int]:
    """Yield the bits of every byte of ``message`` in sending order."""
    data = message.encode(_ENCODING, _ERRORS) if isinstance(message, str) else bytes(message)
    for byte in data:
        yield from char_to_bits(byte)


def signal_for_bit(bit: int) -> signal.Signals:
    """Return the signal that carries ``bit``."""
    return ONE_SIGNAL if bit else ZERO_SIGNAL


class BitDecoder:
    """Collects bits, least significant first, into whole bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits collected towards the current byte."""
        return self._count

    def feed(self, bit: int) -> int | None:
        """Add one bit; return the finished byte once eight have arrived, else None."""
        if bit:
            self._value |= 1 << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self.reset()
        return byte

    def reset(self) -> None:
        """Discard any bits collected so far."""
        self._value = 0
        self._count = 0