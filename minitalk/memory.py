"""Byte-buffer helpers operating on bytes-like objects.

Functions that modify a buffer work in place on a ``bytearray`` (or any
writable buffer) and return it. Ranges that run past the end of a buffer
raise ``ValueError``.
"""

from __future__ import annotations

UINT_MAX = 0xFFFFFFFF


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_span(buffer, offset: int, n: int, what: str) -> None:
    if offset < 0 or offset + n > len(buffer):
        raise ValueError(
            f"{what} range [{offset}, {offset + n}) exceeds buffer of {len(buffer)} bytes"
        )


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Set the first *n* bytes of *buffer* to zero."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *count* elements of *size* bytes.

    Raises OverflowError when the total would not fit in an unsigned
    32-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count and UINT_MAX // count < size:
        raise OverflowError(f"allocation of {count} x {size} bytes is too large")
    return bytearray(count * size)


def memchr(data: bytes, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c & 0xFF`` among the
    first *n* bytes of *data*, or None when there is none."""
    _check_count(n)
    _check_span(data, 0, n, "search")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first *n* bytes of *a* and *b*.

    Returns the difference of the first unequal pair of bytes, or 0.
    """
    _check_count(n)
    _check_span(a, 0, n, "comparison")
    _check_span(b, 0, n, "comparison")
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* to the start of *dest*."""
    _check_count(n)
    _check_span(src, 0, n, "source")
    _check_span(dest, 0, n, "destination")
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move *n* bytes inside *buffer* from offset *src* to offset *dst*.

    The ranges may overlap.
    """
    _check_count(n)
    _check_span(buffer, src, n, "source")
    _check_span(buffer, dst, n, "destination")
    buffer[dst:dst + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first *n* bytes of *buffer* with ``c & 0xFF``."""
    _check_count(n)
    _check_span(buffer, 0, n, "fill")
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer