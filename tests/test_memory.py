import pytest

from rtkit.memory import (
    bzero,
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memindex,
    memmove,
    memset,
)


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 4)
    assert result is buf
    assert set(buf[:4]) == {ord("x")}
    assert buf[4:] == b"ef"


def test_memset_uses_low_byte():
    buf = bytearray(3)
    memset(buf, 0x1FF, 3)
    assert list(buf) == [0xFF] * 3


def test_memset_too_long_raises():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)


def test_memset_negative_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, -1)


def test_bzero():
    buf = bytearray(b"hello")
    bzero(buf, 5)
    assert buf == bytearray(5)


def test_bzero_zero_length_keeps_buffer():
    buf = bytearray(b"keep")
    bzero(buf, 0)
    assert buf == b"keep"


def test_memcpy_copies_prefix():
    dest = bytearray(6)
    src = b"source"
    assert memcpy(dest, src, 3) is dest
    assert dest[:3] == src[:3]
    assert dest[3:] == bytearray(3)


def test_memcpy_short_destination_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abc", 3)


def test_memccpy_stops_after_byte():
    dest = bytearray(10)
    src = b"key=value"
    end = memccpy(dest, src, ord("="), len(src))
    assert end == src.index(b"=") + 1
    assert dest[:end] == src[:end]
    assert dest[end:] == bytearray(len(dest) - end)


def test_memccpy_not_found_copies_all():
    dest = bytearray(5)
    src = b"abcde"
    assert memccpy(dest, src, ord("z"), 5) is None
    assert dest == src


def test_memmove_forward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf[2:6] == original[0:4]
    assert buf[:2] == original[:2]


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_found_and_missing():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")
    assert memchr(data, ord("w"), 5) is None


def test_memchr_zero_byte():
    data = b"ab\x00cd"
    assert memchr(data, 0, len(data)) == 2


def test_memcmp_equal():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_antisymmetric():
    a, b = b"\x01\xff\x10", b"\x01\x00\x20"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memindex_found():
    data = b"abcabc"
    assert memindex(data, ord("c"), len(data)) == data.index(b"c")


def test_memindex_missing_raises():
    with pytest.raises(ValueError):
        memindex(b"abc", ord("z"), 3)


def test_memindex_zero_raises():
    with pytest.raises(ValueError):
        memindex(b"a\x00", 0, 2)