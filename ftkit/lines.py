"""Reading a file descriptor one line at a time.

Lines are returned with their trailing newline, except for a final line
that has none. ``None`` signals that nothing is left.
"""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFFER_SIZE = 10


class _LineBuffer:
    """Bytes read ahead of the lines handed out so far."""

    def __init__(self) -> None:
        self._pending = b""

    @staticmethod
    def _read_more(fd: int, size: int) -> bytes:
        chunks = []
        while True:
            chunk = os.read(fd, size)
            if not chunk:
                break
            chunks.append(chunk)
            if b"\n" in chunk:
                break
        return b"".join(chunks)

    def next_line(self, fd: int, size: int) -> Optional[str]:
        self._pending += self._read_more(fd, size)
        if not self._pending:
            return None
        newline = self._pending.find(b"\n")
        cut = len(self._pending) if newline < 0 else newline + 1
        line, self._pending = self._pending[:cut], self._pending[cut:]
        return line.decode("utf-8", errors="replace")


class LineReader:
    """Reads lines from a file descriptor in chunks of ``buffer_size`` bytes."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._buffer = _LineBuffer()

    def read_line(self) -> Optional[str]:
        """Return the next line, or ``None`` once the input is exhausted."""
        return self._buffer.next_line(self.fd, self.buffer_size)

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


_SHARED = _LineBuffer()


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line from ``fd`` using one buffer shared by all calls.

    Returns ``None`` for a negative descriptor or when nothing is left.
    """
    if fd < 0:
        return None
    return _SHARED.next_line(fd, BUFFER_SIZE)