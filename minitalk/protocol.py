"""The bit-per-signal wire protocol shared by client and server.

Each byte of a message travels as eight bits, most significant first.
A 0 bit is carried by SIGUSR1 and a 1 bit by SIGUSR2. The receiver
acknowledges every bit with SIGUSR2.
"""

from __future__ import annotations

from collections.abc import Iterator

BITS_PER_BYTE = 8


def encode_bits(message: str | bytes) -> Iterator[int]:
    """Yield the bits of *message*, most significant bit of each byte first.

    Text is encoded as UTF-8.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for byte in data:
        for shift in range(BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1


class Decoder:
    """Reassembles bytes from bits, one sender at a time.

    A bit from a sender other than the previous one discards any partly
    received byte and starts afresh.
    """

    def __init__(self) -> None:
        self._sender: int | None = None
        self._value = 0
        self._count = 0

    @property
    def bit_count(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def _reset(self) -> None:
        self._value = 0
        self._count = 0

    def feed(self, sender: int, bit: int) -> int | None:
        """Add one *bit* from *sender*; return the byte it completes, if any."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        if sender != self._sender:
            self._reset()
        self._sender = sender
        self._value = ((self._value << 1) | int(bit)) & 0xFF
        self._count += 1
        if self._count == BITS_PER_BYTE:
            byte = self._value
            self._reset()
            return byte
        return None