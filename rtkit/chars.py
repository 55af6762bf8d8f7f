"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

CharLike = TypeVar("CharLike", int, str)


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


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code  # type: ignore[return-value]


def is_lower(c: int | str) -> bool:
    """True for 'a' through 'z'."""
    return ord("a") <= _code(c) <= ord("z")


def is_upper(c: int | str) -> bool:
    """True for 'A' through 'Z'."""
    return ord("A") <= _code(c) <= ord("Z")


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    return is_lower(c) or is_upper(c)


def is_digit(c: int | str) -> bool:
    """True for '0' through '9'."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space (32) through '~' (126)."""
    return 32 <= _code(c) < 127


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if is_upper(code):
        return _same_kind(c, code + 32)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if is_lower(code):
        return _same_kind(c, code - 32)
    return c


def count_if(s: Iterable[int | str], predicate: Callable[[int | str], bool]) -> int:
    """Count the characters of ``s`` for which ``predicate`` holds."""
    if s is None:
        raise TypeError("count_if() needs a string, not None")
    return sum(1 for ch in s if predicate(ch))