"""The receiving side: turns incoming signals back into bytes on standard output."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO

from minitalk.printf import printf
from minitalk.protocol import Decoder

SIGNALS = (signal.SIGUSR1, signal.SIGUSR2)


class Server:
    """Decodes SIGUSR1/SIGUSR2 bits into bytes and acknowledges each bit."""

    def __init__(self, output: BinaryIO | None = None) -> None:
        self._output = output
        self._decoder = Decoder()
        self._stopped = False

    def _stream(self) -> BinaryIO:
        return self._output if self._output is not None else sys.stdout.buffer

    def handle(self, signum: int, sender_pid: int) -> int | None:
        """Process one signal from *sender_pid*.

        Writes the byte the bit completes, if any, then acknowledges the
        sender with SIGUSR2. Returns the completed byte or None.
        """
        if signum not in SIGNALS:
            raise ValueError(f"unexpected signal {signum}")
        bit = 1 if signum == signal.SIGUSR2 else 0
        byte = self._decoder.feed(sender_pid, bit)
        if byte is not None:
            stream = self._stream()
            stream.write(bytes([byte]))
            stream.flush()
        os.kill(sender_pid, signal.SIGUSR2)
        return byte

    def stop(self) -> None:
        """Make serve() return after the signal it is handling."""
        self._stopped = True

    def serve(self) -> None:
        """Wait for signals and handle them until stop() is called.

        The two protocol signals are blocked while serving and the
        previous signal mask is restored on return.
        """
        self._stopped = False
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, SIGNALS)
        try:
            while not self._stopped:
                info = signal.sigwaitinfo(SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: list[str] | None = None) -> int:
    """Print the process id and serve until interrupted."""
    printf("Server PID: %d\n", os.getpid())
    sys.stdout.flush()
    try:
        Server().serve()
    except KeyboardInterrupt:
        return 0
    return 0