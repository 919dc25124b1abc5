"""Byte-buffer primitives: fill, copy, move, search and compare.

Buffers are bytes-like objects. Functions that write need a mutable
buffer such as a ``bytearray``. Byte values given as integers are narrowed
to their low eight bits. A count that reaches past the end of a buffer
raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

ByteLike = Union[int, str]

SIZE_MAX = 2**64 - 1


def _byte(c: ByteLike) -> int:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        code = ord(c)
        if code > 0xFF:
            raise ValueError(f"character {c!r} does not fit in one byte")
        return code
    raise TypeError("expected an int or a one-character string")


def _check_count(n: int, *sizes: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    for size in sizes:
        if n > size:
            raise ValueError(f"n ({n}) exceeds buffer length ({size})")


def memset(buffer, c: ByteLike, n: int):
    """Set the first ``n`` bytes of ``buffer`` to ``c`` and return ``buffer``."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([_byte(c)]) * n
    return buffer


def bzero(buffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes.

    Raises ``OverflowError`` when the total would not fit in a machine size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("nmemb and size must not be negative")
    if nmemb > 0 and size > SIZE_MAX // nmemb:
        raise OverflowError("nmemb * size overflows")
    return bytearray(nmemb * size)


def memcpy(dest, src, n: int):
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``."""
    source = memoryview(src)
    _check_count(n, len(dest), source.nbytes)
    dest[:n] = source.tobytes()[:n]
    return dest


def memmove(buffer, dest: int, src: int, n: int):
    """Copy ``n`` bytes within ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied
    out first. Returns ``buffer``.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("n must not be negative")
    size = len(buffer)
    if dest + n > size or src + n > size:
        raise ValueError("region extends past the end of the buffer")
    if dest != src and n:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data, c: ByteLike, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``, or ``None``."""
    view = memoryview(data)
    _check_count(n, view.nbytes)
    index = view.tobytes()[:n].find(bytes([_byte(c)]))
    return index if index >= 0 else None


def memcmp(s1, s2, n: int) -> int:
    """Compare the first ``n`` bytes.

    Returns the difference of the first unequal bytes, or 0.
    """
    first = memoryview(s1).tobytes()
    second = memoryview(s2).tobytes()
    _check_count(n, len(first), len(second))
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0