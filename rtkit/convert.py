"""Conversions between decimal text and integers."""

from __future__ import annotations

from itertools import takewhile

from rtkit.chars import count_if, is_digit

_WHITESPACE = " \t\n\v\f\r"
_MAX_DIGITS = 18


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to the range of a signed 32-bit integer, wrapping around."""
    return ((value + 2**31) % 2**32) - 2**31


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit, and text with no digits gives 0. When the text after the sign
    holds more than 18 digits anywhere, the result is -1 for a positive and 0
    for a negative number. The value wraps to a signed 32-bit integer.
    """
    if not isinstance(text, str):
        raise TypeError(f"atoi() needs a string, not {type(text).__name__}")
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    elif rest.startswith("+"):
        rest = rest[1:]
    if count_if(rest, is_digit) > _MAX_DIGITS:
        return -1 if sign > 0 else 0
    digits = "".join(takewhile(is_digit, rest))
    value = int(digits) if digits else 0
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Decimal text of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"itoa() needs an int, not {type(n).__name__}")
    return str(n)