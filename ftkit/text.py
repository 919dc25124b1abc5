"""String length, bounded copying and concatenation, and integer conversion.

Strings are treated as terminated by their first NUL character, if any:
everything from a NUL onwards is ignored.
"""

from __future__ import annotations

from ftkit.chars import is_digit
from ftkit.output import INT_MAX, INT_MIN

_SPACES = frozenset("\t\n\v\f\r ")
_UINT_MOD = 2**32


def _visible(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _to_int32(value: int) -> int:
    value %= _UINT_MOD
    return value - _UINT_MOD if value > INT_MAX else value


def strlen(s: str) -> int:
    """Number of characters before the first NUL (or the whole length)."""
    return len(_visible(s))


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text, truncated to leave room for a terminator, and
    the full length of ``src``. A ``size`` of 0 copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    text = _visible(src)
    if size == 0:
        return "", len(text)
    return text[:size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer, it is returned unchanged and the
    length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    source = _visible(src)
    if size == 0:
        return dst, len(source)
    current = _visible(dst)
    dest_len = min(len(current), size)
    if dest_len == size:
        return dst, size + len(source)
    room = size - dest_len - 1
    return current + source[:room], dest_len + len(source)


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL."""
    return _visible(s)


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. Results wrap around as a 32-bit signed integer does.
    Text with no digits gives 0.
    """
    text = _visible(s)
    pos = 0
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < len(text) and is_digit(text[pos]):
        value = (value * 10 + ord(text[pos]) - ord("0")) % _UINT_MOD
        pos += 1
    return _to_int32(_to_int32(value) * sign)


def itoa(n: int) -> str:
    """Decimal text for a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)