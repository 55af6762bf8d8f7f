"""Character, memory, string, number and line-reading helpers with scene-format vocabulary."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "search", "convert", "strings", "output", "lines", "scene"]