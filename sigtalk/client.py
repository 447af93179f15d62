"""Send a text message to a listening process, one bit per signal."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence

from sigtalk.printf import printf
from sigtalk.protocol import char_to_bits, message_bits, signal_for_bit
from sigtalk.strtools import atoi

__all__ = ["DEFAULT_DELAY", "USAGE", "send_char", "send_message", "main"]

DEFAULT_DELAY = 0.0005
USAGE = "Error\nWrite ./server <PID Number> <Text message>"


def _send_bits(pid: int, bits, delay: float) -> None:
    for bit in bits:
        os.kill(pid, signal_for_bit(bit))
        time.sleep(delay)


def send_char(pid: int, byte: int, delay: float = DEFAULT_DELAY) -> None:
    """Signal the eight bits of ``byte`` to process ``pid``, pausing ``delay`` seconds after each."""
    _send_bits(pid, char_to_bits(byte), delay)


def send_message(pid: int, message: str | bytes, delay: float = DEFAULT_DELAY) -> None:
    """Signal every byte of ``message`` to process ``pid``."""
    _send_bits(pid, message_bits(message), delay)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the client: ``<pid> <message>``. Returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf(USAGE)
        return 1
    pid_text, message = args
    send_message(atoi(pid_text), os.fsencode(message))
    return 0


if __name__ == "__main__":
    sys.exit(main())