"""Character, string, memory, descriptor-output, line-reading and printf-style helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "search", "memory", "output", "text", "transform", "lines", "printf"]