"""The sending side: delivers a message to a server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time

from minitalk.ascii import atoi
from minitalk.printf import printf
from minitalk.protocol import encode_bits

DEFAULT_DELAY = 10e-6


class ClientError(ValueError):
    """Invalid client arguments."""


def parse_args(argv: list[str]) -> tuple[int, str]:
    """Return the server pid and message from a two-element argument list."""
    if len(argv) != 2:
        raise ClientError("Error Arguments")
    server_pid = atoi(argv[0])
    if server_pid <= 0:
        raise ClientError("Error PID")
    message = argv[1]
    if not message:
        raise ClientError("Error Message")
    return server_pid, message


def send_message(server_pid: int, message: str | bytes, delay: float = DEFAULT_DELAY) -> int:
    """Send *message* to *server_pid*, waiting for an acknowledgement per bit.

    Returns the number of bits sent.
    """
    if server_pid <= 0:
        raise ClientError("Error PID")
    sent = 0
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, {signal.SIGUSR2})
    try:
        for bit in encode_bits(message):
            os.kill(server_pid, signal.SIGUSR2 if bit else signal.SIGUSR1)
            signal.sigwait({signal.SIGUSR2})
            sent += 1
            if delay > 0:
                time.sleep(delay)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)
    return sent


def main(argv: list[str] | None = None) -> int:
    """Command-line entry: client <server-pid> <message>."""
    args = sys.argv[1:] if argv is None else argv
    try:
        server_pid, message = parse_args(args)
    except ClientError as exc:
        printf("%s\n", str(exc))
        return 0
    try:
        send_message(server_pid, message)
    except OSError as exc:
        print(f"cannot signal process {server_pid}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0