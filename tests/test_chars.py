import string

import pytest

from cubtools.chars import is_alnum, is_alpha, is_ascii, is_digit, is_print, to_lower, to_upper


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha(c):
    assert is_alpha(c)
    assert is_alnum(c)
    assert not is_digit(c)


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c)
    assert is_digit(ord(c))
    assert is_alnum(c)
    assert not is_alpha(c)


@pytest.mark.parametrize("c", ["@", "[", "`", "{", " ", "/", ":"])
def test_neighbours_are_not_alnum(c):
    assert not is_alnum(c)


def test_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_print_bounds():
    assert is_print(32)
    assert is_print(126)
    assert not is_print(31)
    assert not is_print(127)


def test_case_conversion_of_str():
    assert to_upper("a") == "A"
    assert to_lower("Z") == "z"


def test_case_conversion_of_codes():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


@pytest.mark.parametrize("c", list(string.ascii_lowercase))
def test_case_round_trip(c):
    assert to_lower(to_upper(c)) == c
    assert to_upper(c) == c.upper()


@pytest.mark.parametrize("c", list("0@[`{ ~"))
def test_non_letters_unchanged(c):
    assert to_upper(c) == c
    assert to_lower(c) == c