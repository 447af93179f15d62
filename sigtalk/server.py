"""Receive messages sent bit by bit as SIGUSR1 and SIGUSR2 signals."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Sequence
from typing import BinaryIO

from sigtalk.printf import render
from sigtalk.protocol import ONE_SIGNAL, ZERO_SIGNAL, BitDecoder

__all__ = ["Receiver", "serve", "main"]


class Receiver:
    """Signal handler that rebuilds bytes from signals and writes them to a stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream
        self._decoder = BitDecoder()

    def handle(self, signum: int, frame: object = None) -> None:
        """Take SIGUSR1 as a one bit and any other signal as a zero bit."""
        byte = self._decoder.feed(signum == ONE_SIGNAL)
        if byte is None:
            return
        self.stream.write(bytes([byte]))
        self.stream.flush()


def serve(stream: BinaryIO | None = None) -> None:
    """Announce this process's PID on ``stream`` and print received bytes forever.

    The previous handlers are restored when waiting is interrupted by an
    exception such as KeyboardInterrupt, which is then re-raised.
    """
    out = sys.stdout.buffer if stream is None else stream
    out.write(render("PID: %d\n", os.getpid()).encode("ascii"))
    out.flush()
    receiver = Receiver(out)
    previous = {sig: signal.signal(sig, receiver.handle) for sig in (ONE_SIGNAL, ZERO_SIGNAL)}
    try:
        while True:
            signal.pause()
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server until interrupted. Arguments are ignored."""
    try:
        serve(sys.stdout.buffer)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())