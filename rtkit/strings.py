"""Building, joining, slicing and splitting strings."""

from __future__ import annotations

from typing import Callable, Optional

_TRIM_CHARS = " \n\t"


def _require_str(value: Optional[str], name: str) -> str:
    if value is None:
        raise TypeError(f"{name} must be a string, not None")
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, not {type(value).__name__}")
    return value


def _require_count(n: int, name: str = "count") -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def _require_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strcat(dest: str, src: str) -> str:
    """Return ``dest`` followed by ``src``."""
    return _require_str(dest, "dest") + _require_str(src, "src")


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    The result holds at most ``size - 1`` characters; ``dst`` is never
    shortened. Returns the result and the length the full concatenation
    would have had, counting ``size`` in place of ``len(dst)`` when the
    buffer is no longer than ``dst``.
    """
    dst = _require_str(dst, "dst")
    src = _require_str(src, "src")
    _require_count(size, "size")
    wanted = len(src) + min(size, len(dst))
    room = max(0, size - len(dst) - 1)
    return dst + src[:room], wanted


def strncat(dest: str, src: str, n: int) -> str:
    """Return ``dest`` followed by at most ``n`` characters of ``src``."""
    _require_count(n)
    return _require_str(dest, "dest") + _require_str(src, "src")[:n]


def strjoin(a: str, b: str) -> str:
    """Return a new string made of ``a`` then ``b``."""
    return _require_str(a, "a") + _require_str(b, "b")


def strmap(s: str, f: Callable[[str], str]) -> str:
    """Return a string with ``f`` applied to every character of ``s``."""
    s = _require_str(s, "s")
    if f is None:
        raise TypeError("strmap() needs a function")
    return "".join(f(ch) for ch in s)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a string with ``f(index, char)`` applied to every character of ``s``."""
    s = _require_str(s, "s")
    if f is None:
        raise TypeError("strmapi() needs a function")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def strreplace(s: str, c: str, index: int) -> str:
    """Return ``s`` with the character at ``index`` replaced by ``c``."""
    s = _require_str(s, "s")
    _require_char(c)
    if not 0 <= index < len(s):
        raise IndexError(f"index {index} out of range for a string of {len(s)}")
    return s[:index] + c + s[index + 1:]


def strsplit(s: str, c: str) -> list[str]:
    """Split ``s`` on the character ``c``, dropping empty words."""
    s = _require_str(s, "s")
    _require_char(c)
    return [word for word in s.split(c) if word]


def strsub(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``."""
    s = _require_str(s, "s")
    _require_count(start, "start")
    _require_count(length, "length")
    if start > len(s):
        raise IndexError(f"start {start} lies past the end of a string of {len(s)}")
    return s[start:start + length]


def strtrim(s: str) -> str:
    """Strip spaces, newlines and tabs from both ends of ``s``."""
    return _require_str(s, "s").strip(_TRIM_CHARS)