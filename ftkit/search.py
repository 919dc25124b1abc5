"""Searching and comparing within strings.

Positions are returned as indices into the searched string; ``None``
means no match.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

CharLike = Union[int, str]


def _target(c: CharLike) -> tuple[str, bool]:
    """Return the character sought and whether the terminator was asked for."""
    if isinstance(c, bool):
        raise TypeError("expected an int code or a one-character string")
    if isinstance(c, int):
        # Codes are narrowed to one byte; only a literal 0 asks for the end.
        return chr(c % 256), c == 0
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c, c == "\0"
    raise TypeError("expected an int code or a one-character string")


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``.

    Asking for the terminator returns ``len(s)``.
    """
    ch, wants_end = _target(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if wants_end else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``.

    Asking for the terminator returns ``len(s)``.
    """
    ch, wants_end = _target(c)
    index = s.rfind(ch)
    if index >= 0:
        return index
    return len(s) if wants_end else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code-point difference at the first mismatch, or 0. A string
    that ends early compares as if followed by a NUL character.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: Optional[int] = None) -> Optional[int]:
    """Index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` matches at 0. ``length`` of ``None`` searches the
    whole string.
    """
    if length is not None and length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    if length == 0:
        return None
    window = big if length is None else big[:length]
    index = window.find(little)
    return index if index >= 0 else None