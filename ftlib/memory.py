"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

import sys
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

__all__ = [
    "memset",
    "bzero",
    "memcpy",
    "memmove",
    "memchr",
    "memcmp",
    "calloc",
    "SIZE_MAX",
]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, available: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > available:
        raise ValueError(f"{what} holds {available} bytes, {n} requested")


def _check_range(offset: int, n: int, size: int, what: str) -> None:
    if offset < 0:
        raise ValueError(f"{what} offset must not be negative, got {offset}")
    _check_count(n, size - offset, f"{what} range starting at {offset}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_count(n, len(buf), "buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_count(n, len(dest), "destination")
    _check_count(n, len(src), "source")
    if n == 0 or dest is src:
        return dest
    dest[:n] = bytes(memoryview(src)[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    The ranges may overlap; the result is as if the source bytes were first
    copied aside.
    """
    _check_range(dest, n, len(buf), "destination")
    _check_range(src, n, len(buf), "source")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` in ``data[:n]``, or None."""
    _check_count(n, len(data), "data")
    index = bytes(memoryview(data)[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b`` as unsigned values.

    Returns the difference of the first differing pair, or 0 if they match.
    """
    _check_count(n, len(a), "first operand")
    _check_count(n, len(b), "second operand")
    for x, y in zip(memoryview(a)[:n].tobytes(), memoryview(b)[:n].tobytes()):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes.

    Raises OverflowError when the total would not fit in a size_t.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb != 0 and size > SIZE_MAX // nmemb:
        raise OverflowError(f"{nmemb} * {size} bytes exceeds the addressable size")
    return bytearray(nmemb * size)