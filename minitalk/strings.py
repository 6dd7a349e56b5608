"""String helpers with the semantics of the classic C string routines.

Positions are returned as indexes rather than pointers, and "not found"
is ``None``. A NUL character (``"\\0"``) searched for is found at the end
of the text, as with a terminated C string.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return *c* as a one-character string; ints are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: int | str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty pieces."""
    separator = _char(sep)
    if separator == _NUL:
        return [text] if text else []
    return [piece for piece in text.split(separator) if piece]


def strchr(text: str, c: int | str) -> int | None:
    """Index of the first occurrence of *c* in *text*, or None.

    Searching for NUL yields ``len(text)``.
    """
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Index of the last occurrence of *c* in *text*, or None.

    Searching for NUL yields ``len(text)``.
    """
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of *s1* and *s2*.

    Returns the code difference of the first differing pair, or 0.
    Comparison stops at the end of *s1*.
    """
    _non_negative(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Index of *needle* within the first *n* characters of *haystack*.

    An empty needle is found at 0; otherwise None when absent.
    """
    _non_negative(n, "n")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters including the terminator.

    Returns the (possibly truncated) copy and the full length of *src*.
    """
    _non_negative(size, "size")
    if size < 1:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dest* within a buffer of *size* characters.

    Returns the resulting text and the length the full concatenation would
    have needed; when *size* is smaller than *dest*, that is
    ``len(src) + size``.
    """
    _non_negative(size, "size")
    if size < 1:
        return dest, len(src) + size
    room = max(0, size - 1 - len(dest))
    result = dest + src[:room]
    if size < len(dest):
        return result, len(src) + size
    return result, len(dest) + len(src)


def substr(text: str, start: int, length: int) -> str:
    """Up to *length* characters of *text* starting at *start*.

    A start at or past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of *s1* and *s2*."""
    return s1 + s2


def strtrim(text: str, chars: str) -> str:
    """*text* with every character found in *chars* removed from both ends."""
    if not isinstance(chars, str):
        raise TypeError(f"chars must be a str, got {type(chars).__name__}")
    return text.strip(chars) if chars else text


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str],
    func: Callable[[int, str], str],
) -> MutableSequence[str]:
    """Replace each element of *chars* in place with ``func(index, element)``.

    Returns *chars*.
    """
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)
    return chars