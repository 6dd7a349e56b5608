"""A small printf supporting the conversions %c %s %p %d %i %u %x %X and %%.

No flags, widths or precisions are recognised. An unknown conversion
character is dropped without consuming an argument, and a lone ``%`` at
the end of the format is ignored.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable
from typing import Any, TextIO

_UINT_MASK = 0xFFFFFFFF
_ULLONG_MASK = 0xFFFFFFFFFFFFFFFF
_INT_HALF = 1 << 31


def _integer(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"expected an integer argument, got {type(value).__name__}") from None


def _as_char(value: Any, _spec: str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_integer(value) & 0xFF)


def _as_string(value: Any, _spec: str) -> str:
    if value is None:
        return "(null)"
    if isinstance(value, str):
        return value
    raise TypeError(f"%s expects a str or None, got {type(value).__name__}")


def _as_pointer(value: Any, _spec: str) -> str:
    address = 0 if value is None else _integer(value) & _ULLONG_MASK
    return f"0x{address:x}"


def _as_signed(value: Any, _spec: str) -> str:
    number = (_integer(value) + _INT_HALF) % (1 << 32) - _INT_HALF
    return str(number)


def _as_unsigned(value: Any, _spec: str) -> str:
    return str(_integer(value) & _UINT_MASK)


def _as_hex(value: Any, spec: str) -> str:
    number = _integer(value) & _UINT_MASK
    return f"{number:X}" if spec == "X" else f"{number:x}"


_CONVERTERS: dict[str, Callable[[Any, str], str]] = {
    "c": _as_char,
    "s": _as_string,
    "p": _as_pointer,
    "d": _as_signed,
    "i": _as_signed,
    "u": _as_unsigned,
    "x": _as_hex,
    "X": _as_hex,
}


def format(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by the formatted *args*.

    Raises TypeError when there are fewer arguments than conversions.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for conversion %{spec}") from None
        pieces.append(converter(value, spec))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to *file* (standard output by default).

    Returns the number of characters written.
    """
    text = format(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)