import pytest

from rtkit.convert import atoi, itoa


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648, 1000000])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_extremes_from_source():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")
    with pytest.raises(TypeError):
        itoa(True)


@pytest.mark.parametrize("prefix", [" ", "\t", "\n", "\v", "\f", "\r", " \t\n "])
def test_atoi_skips_whitespace(prefix):
    assert atoi(prefix + "-123") == -123


def test_atoi_sign_handling():
    assert atoi("+77") == 77
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_atoi_stops_at_non_digit():
    assert atoi("42abc") == 42
    assert atoi("abc") == 0
    assert atoi("") == 0


def test_atoi_too_many_digits():
    assert atoi("9" * 19) == -1
    assert atoi("-" + "9" * 19) == 0


def test_atoi_digit_count_covers_whole_text():
    assert atoi("1 " + "2" * 18) == -1
    assert atoi("1 " + "2" * 17) == 1


def test_atoi_eighteen_digits_wraps_to_int32():
    value = atoi("9" * 18)
    assert -2**31 <= value < 2**31
    assert (value - 10**18 + 1) % 2**32 == 0


def test_atoi_wraps_past_int32():
    assert atoi("4294967297") == 1


def test_atoi_rejects_non_string():
    with pytest.raises(TypeError):
        atoi(12)