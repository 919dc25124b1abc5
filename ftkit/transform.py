"""Building new strings from existing ones: slicing, joining, trimming,
splitting and mapping over characters."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

from ftkit.text import strdup


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = strdup(s)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return strdup(s).strip(strdup(charset))


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {len(sep)}")
    return [word for word in strdup(s).split(sep) if word]


def rotate_letter(i: int, c: str) -> str:
    """Shift an ASCII letter ``i`` places along the alphabet, keeping its case.

    Anything other than an ASCII letter is returned unchanged.
    """
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)}")
    for first, last in (("a", "z"), ("A", "Z")):
        if first <= c <= last:
            return chr((ord(c) - ord(first) + i) % 26 + ord(first))
    return c


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for every character of ``s``."""
    return "".join(func(i, ch) for i, ch in enumerate(strdup(s)))


def striteri(chars: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` for each item of ``chars`` in place.

    A value returned by ``func`` replaces the item; ``None`` leaves it as it is.
    """
    for i, item in enumerate(chars):
        replacement = func(i, item)
        if replacement is not None:
            chars[i] = replacement