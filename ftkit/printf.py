"""Formatted output with the conversions c, s, p, d, i, u, x, X and %.

Other conversion characters produce nothing and consume no argument.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Iterator

from ftkit.text import strdup

_PIECE = re.compile(r"%(.?)|[^%]+", re.DOTALL)
_UINT32 = 2**32
_POINTER_MASK = 2**64 - 1


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _as_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} requires an integer, got {type(value).__name__}")
    return value


def _int32(value: int) -> int:
    value %= _UINT32
    return value - _UINT32 if value >= _UINT32 // 2 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c requires a single character, got {len(value)}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _as_int(value, "p") & _POINTER_MASK
    return "(nil)" if address == 0 else f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _char(_next_arg(args, spec))
    if spec == "s":
        value = _next_arg(args, spec)
        return "(null)" if value is None else strdup(str(value))
    if spec == "p":
        return _pointer(_next_arg(args, spec))
    if spec in ("d", "i"):
        return str(_int32(_as_int(_next_arg(args, spec), spec)))
    if spec == "u":
        return str(_as_int(_next_arg(args, spec), spec) % _UINT32)
    if spec in ("x", "X"):
        value = _as_int(_next_arg(args, spec), spec) % _UINT32
        return format(value, spec)
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the given arguments."""
    if fmt is None:
        raise TypeError("format must be a string, not None")
    remaining = iter(args)
    pieces = []
    for match in _PIECE.finditer(strdup(fmt)):
        spec = match.group(1)
        pieces.append(match.group(0) if spec is None else _convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)