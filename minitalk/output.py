"""Write characters, strings and numbers to an operating-system file descriptor.

Each function returns the number of bytes written.
"""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> int:
    """Write the whole of *data* to *fd*, retrying on short writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def _encode(text: str | bytes) -> bytes:
    if isinstance(text, bytes):
        return text
    if isinstance(text, str):
        return text.encode("utf-8")
    raise TypeError(f"expected str or bytes, got {type(text).__name__}")


def putchar_fd(c: int | str | bytes, fd: int) -> int:
    """Write the single character *c* to *fd*.

    An integer is truncated to one byte, as a C ``char`` would be.
    """
    if isinstance(c, bool):
        raise TypeError("expected a character, got bool")
    if isinstance(c, int):
        data = bytes([c & 0xFF])
    elif isinstance(c, (str, bytes)):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = _encode(c)
    else:
        raise TypeError(f"expected a character, got {type(c).__name__}")
    return _write_all(fd, data)


def putstr_fd(text: str | bytes | None, fd: int) -> int:
    """Write *text* to *fd*; ``None`` writes nothing."""
    if text is None:
        return 0
    return _write_all(fd, _encode(text))


def putendl_fd(text: str | bytes | None, fd: int) -> int:
    """Write *text* followed by a newline to *fd*; ``None`` writes nothing."""
    if text is None:
        return 0
    return _write_all(fd, _encode(text) + b"\n")


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal representation of *n* to *fd*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return _write_all(fd, str(n).encode("ascii"))