"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(c: int | str) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int code or a one-character string, not bool")
    if isinstance(c, int):
        if not 0 <= c <= 0x10FFFF:
            raise ValueError(f"character code out of range: {c}")
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int code or a one-character string, not {type(c).__name__}")


def put_char(c: int | str, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    _target(stream).write(_char(c))


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream``; a missing string writes nothing."""
    if s is None:
        return
    if not isinstance(s, str):
        raise TypeError(f"put_str() needs a string, not {type(s).__name__}")
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"put_nbr() needs an int, not {type(n).__name__}")
    _target(stream).write(str(n))