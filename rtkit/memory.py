"""Byte-buffer operations on mutable and immutable byte sequences."""

from __future__ import annotations

from typing import Optional

BytesLike = bytes | bytearray | memoryview


def _check_length(buf: BytesLike, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(buf):
        raise IndexError(f"{name} holds {len(buf)} bytes, {n} requested")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_length(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    _check_length(src, n, "source")
    _check_length(dest, n, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memccpy(dest: bytearray, src: BytesLike, c: int, n: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dest`` up to and including the first ``c``.

    Returns the index in ``dest`` just past the copied ``c``, or ``None`` when
    ``c`` does not occur in the first ``n`` bytes, in which case all ``n`` are copied.
    """
    found = memchr(src, c, n)
    count = n if found is None else found + 1
    memcpy(dest, src, count)
    return None if found is None else found + 1


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf``; the regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dest_offset, src_offset) + n > len(buf):
        raise IndexError("move runs past the end of the buffer")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(buf: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``c`` in ``buf[:n]``, or ``None``."""
    _check_length(buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch, else 0."""
    _check_length(a, n, "first buffer")
    _check_length(b, n, "second buffer")
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memindex(buf: BytesLike, c: int, n: int) -> int:
    """Index of the first byte equal to ``c`` in ``buf[:n]``.

    Raises ``ValueError`` when ``c`` is zero or does not occur.
    """
    if not c:
        raise ValueError("cannot search for a zero byte")
    _check_length(buf, n)
    for index, byte in enumerate(buf[:n]):
        if byte == c:
            return index
    raise ValueError(f"byte {c} not found in the first {n} bytes")