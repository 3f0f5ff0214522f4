"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

__all__ = ["LineReader", "get_next_line", "BUFFER_SIZE", "MAX_FD"]

BUFFER_SIZE = 1024
MAX_FD = 1024


class LineReader:
    """Return successive lines read from ``fd``, ``buffer_size`` bytes at a time.

    Each line keeps its trailing newline; the last line of the input may lack
    one. Bytes that are not valid UTF-8 are kept as surrogate escapes.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _fill(self) -> None:
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                return
            self._pending += chunk

    def read_line(self) -> Optional[str]:
        """Return the next line, or None once the input is exhausted."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        end = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode("utf-8", "surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line of ``fd``, keeping separate state for each descriptor.

    Returns None at the end of input, after which the state for ``fd`` is
    dropped.
    """
    if not 0 <= fd < MAX_FD:
        raise ValueError(f"file descriptor must be in [0, {MAX_FD}), got {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd, BUFFER_SIZE)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line