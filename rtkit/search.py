"""String comparison and searching with C-string semantics.

Comparisons treat the end of a string as a terminating zero character and
report the difference of the first pair of characters that differ.
Searches return indices rather than pointers.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a one-character str."""
    if isinstance(c, bool):
        raise TypeError("expected an int code or a one-character string, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected an int code or a one-character string, not {type(c).__name__}")


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"character count must not be negative, got {n}")


def strcmp(a: str, b: str) -> int:
    """Compare two strings; return the code difference at the first mismatch, else 0.

    Comparison stops at the end of ``a`` or at a zero character in it.
    """
    for x, y in zip_longest(map(ord, a), map(ord, b), fillvalue=0):
        if x != y or x == 0:
            return x - y
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings, as :func:`strcmp` does."""
    _check_count(n)
    if n == 0:
        return 0
    return strcmp(a[:n], b[:n])


def strequ(a: Optional[str], b: Optional[str]) -> bool:
    """True when both strings are given and equal."""
    if a is None or b is None:
        return False
    return strcmp(a, b) == 0


def strnequ(a: Optional[str], b: Optional[str], n: int) -> bool:
    """True when the first ``n`` characters match.

    A count of zero, or two missing strings, count as equal; one missing
    string never equals a present one.
    """
    _check_count(n)
    if n == 0 or (a is None and b is None):
        return True
    if a is None or b is None:
        return False
    return strncmp(a, b, n) == 0


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle`` in ``haystack``, or ``None``.

    An empty needle is found at index 0.
    """
    index = haystack.find(needle)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``n`` characters, or ``None``.

    An empty needle is found at index 0.
    """
    _check_count(n)
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strchr(s: str, c: int | str) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or ``None``.

    Searching for the zero character finds the terminator at ``len(s)``.
    """
    code = _code(c)
    index = s.find(chr(code))
    if index >= 0:
        return index
    if code == 0:
        return len(s)
    return None


def strrchr(s: str, c: int | str) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or ``None``.

    Searching for the zero character finds the terminator at ``len(s)``.
    """
    code = _code(c)
    if code == 0:
        return len(s)
    index = s.rfind(chr(code))
    return None if index < 0 else index


def strindex(s: str, c: int | str) -> int:
    """Index of the first ``c`` in ``s`` at position 1 or later.

    The first character of ``s`` is never examined. Raises ``ValueError``
    when ``c`` is the zero character or is not found.
    """
    code = _code(c)
    if code == 0:
        raise ValueError("cannot search for the zero character")
    index = s.find(chr(code), 1)
    if index < 0:
        raise ValueError(f"character {chr(code)!r} not found after the first position")
    return index