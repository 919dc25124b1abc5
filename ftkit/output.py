"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _until_nul(s: str) -> str:
    return s.split("\0", 1)[0]


def putchar_fd(c: Union[int, str], fd: int) -> None:
    """Write one character to ``fd``; integer codes are narrowed to a byte."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string")
    if isinstance(c, int):
        data = bytes([c & 0xFF])
    elif isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        data = c.encode("utf-8")
    else:
        raise TypeError("expected an int or a one-character string")
    _write_all(fd, data)


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; nothing is written for ``None`` or descriptor 0."""
    if s is None or not fd:
        return
    _write_all(fd, _until_nul(s).encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` and a newline to ``fd``; skipped for ``None`` or descriptor 0."""
    if s is None or not fd:
        return
    _write_all(fd, (_until_nul(s) + "\n").encode("utf-8"))


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of a 32-bit signed integer to ``fd``."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    _write_all(fd, str(n).encode("ascii"))