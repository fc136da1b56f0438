import pytest

from cubtools.numbers import (
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    atoi,
    itoa,
    long_atoi,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -42abc", -42),
        ("\t\n+17", 17),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi_basic(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "--5", "+-3", " - 3"])
def test_atoi_no_digits(text):
    assert atoi(text) == 0


def test_atoi_truncates_to_int():
    assert atoi("2147483648") == INT_MIN


def test_atoi_long_overflow():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


def test_long_atoi_range_ends():
    assert long_atoi(str(LONG_MAX)) == LONG_MAX
    assert long_atoi(str(-LONG_MAX)) == -LONG_MAX


def test_long_atoi_clamps():
    assert long_atoi("99999999999999999999") == LONG_MAX
    assert long_atoi("-99999999999999999999") == LONG_MIN


def test_long_atoi_beyond_int():
    assert long_atoi("3000000000") == 3000000000


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, INT_MAX, INT_MIN, 1000000])
def test_itoa_roundtrip(n):
    assert atoi(itoa(n)) == n


def test_itoa_extremes():
    assert itoa(INT_MIN) == "-2147483648"
    assert itoa(INT_MAX) == "2147483647"
    assert itoa(0) == "0"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(INT_MAX + 1)
    with pytest.raises(OverflowError):
        itoa(INT_MIN - 1)