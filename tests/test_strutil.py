import pytest

from cubtools.strutil import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_skips_empty_words():
    assert split(",,hello,,world,", ",") == ["hello", "world"]


@pytest.mark.parametrize("text", ["", ",,,", ","])
def test_split_without_words(text):
    assert split(text, ",") == []


def test_split_words_contain_no_separator():
    words = split("  map  of   the world ", " ")
    assert all(word and " " not in word for word in words)
    assert " ".join(words) == "map of the world"


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_substr_basic_and_clamped():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"


def test_substr_start_past_end():
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 99, 2) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strtrim_both_ends():
    assert strtrim("xyhixyx", "xy") == "hi"


def test_strtrim_everything_and_nothing():
    assert strtrim("aaaa", "a") == ""
    assert strtrim("  keep  ", "") == "  keep  "


def test_strjoin():
    assert strjoin("ab", "cd") == "abcd"
    assert strjoin("", "") == ""


def test_strnstr_within_limit():
    assert strnstr("foo bar baz", "bar", 7) == 4


def test_strnstr_match_crosses_limit():
    assert strnstr("foo bar baz", "bar", 6) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "zz", 3) is None


def test_strncmp_equal_prefix():
    assert strncmp("abcx", "abcy", 3) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("ab", "abc", 3) == -ord("c")


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_antisymmetric():
    assert strncmp("apple", "apply", 5) == -strncmp("apply", "apple", 5)


def test_strchr_and_strrchr():
    assert strchr("banana", "a") == 1
    assert strrchr("banana", "a") == 5
    assert strchr("banana", "z") is None
    assert strrchr("banana", "z") is None


def test_strchr_nul_finds_terminator():
    assert strchr("abc", "\0") == 3
    assert strrchr("abc", "\0") == 3


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strlcpy_truncates():
    assert strlcpy("hello", 3) == ("he", 5)


def test_strlcpy_zero_and_large_size():
    assert strlcpy("hello", 0) == ("", 5)
    assert strlcpy("hello", 64) == ("hello", 5)


@pytest.mark.parametrize("size", range(1, 8))
def test_strlcpy_fits_buffer(size):
    copied, total = strlcpy("hello", size)
    assert len(copied) <= size - 1
    assert "hello".startswith(copied)
    assert total == len("hello")


def test_strlcat_fits():
    assert strlcat("ab", "cd", 10) == ("abcd", 4)


def test_strlcat_truncates():
    assert strlcat("ab", "cdef", 5) == ("abcd", 6)


def test_strlcat_no_room():
    assert strlcat("ab", "cd", 0) == ("ab", 2)
    assert strlcat("abcd", "ef", 2) == ("abcd", 4)


def test_strmapi_uses_index():
    assert strmapi("abc", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbC"


def test_strmapi_nul_ends_result():
    assert strmapi("abcd", lambda i, c: "\0" if i == 2 else c) == "ab"


def test_striteri_mutates_in_place():
    buffer = list("abc")
    result = striteri(buffer, lambda i, c: c * (i + 1))
    assert result is buffer
    assert buffer == ["a", "bb", "ccc"]


def test_striteri_bytearray():
    data = bytearray(b"abc")
    striteri(data, lambda i, b: b - 32)
    assert data == bytearray(b"ABC")