"""Searching, measuring, comparing and converting strings."""

from __future__ import annotations

from itertools import takewhile, zip_longest
from typing import Optional, Tuple, Union

from .chars import is_digit

__all__ = [
    "strlen",
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "strnstr",
    "strncmp",
    "strdup",
    "atoi",
    "itoa",
    "INT_MIN",
    "INT_MAX",
]

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"
_NUL = "\0"


def _check_size(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def _target(c: Union[int, str]) -> str:
    """Return the character searched for, given as a code or a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``, so a length
    greater than or equal to ``size`` signals truncation.
    """
    _check_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a total buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``dest`` already fills the buffer it is returned unchanged together
    with ``size + len(src)``.
    """
    _check_size(size, "size")
    dest_len = len(dest)
    src_len = len(src)
    if size == 0 or dest_len >= size:
        return dest, size + src_len
    to_copy = min(size - dest_len - 1, src_len)
    return dest + src[:to_copy], dest_len + src_len


def strchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character yields ``len(s)``, the position of the
    terminator.
    """
    ch = _target(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character yields ``len(s)``.
    """
    ch = _target(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Return the index of ``little`` in the first ``n`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when there is no
    match lying wholly within the first ``n`` characters.
    """
    _check_size(n, "length")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the code difference of the first differing pair, where the end of
    a string counts as code 0, or 0 when they agree.
    """
    _check_size(n, "length")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strdup(s: str) -> str:
    """Return a string equal to ``s``."""
    return str(s)


def atoi(s: str) -> int:
    """Convert the leading integer of ``s``.

    Leading whitespace and a single sign are accepted; conversion stops at
    the first non-digit. A string with no digits gives 0. The result wraps
    like a 32-bit signed integer.
    """
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = "".join(takewhile(is_digit, text))
    number = int(digits) if digits else 0
    return _wrap_int32(number * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)