"""Building new strings: slicing, joining, trimming, mapping and splitting."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

__all__ = ["substr", "strjoin", "strtrim", "strmapi", "striteri", "split"]


def _delimiter(c: Union[int, str]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` at or past the end of ``s`` gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return s1 + s2


def strtrim(s1: str, charset: str) -> str:
    """Return ``s1`` without the leading and trailing characters in ``charset``."""
    return s1.strip(charset)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Apply ``f(index, char)`` to each item of ``chars`` in place.

    The value ``f`` returns replaces the character; None leaves it unchanged.
    """
    for index, ch in enumerate(chars):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement


def split(s: str, c: Union[int, str]) -> List[str]:
    """Split ``s`` on the delimiter ``c``, dropping empty pieces."""
    return [word for word in s.split(_delimiter(c)) if word]