import pytest

from cubtools.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello")
    result = memset(buf, ord("A"), 3)
    assert result is buf
    assert all(b == ord("A") for b in buf[:3])
    assert buf[3:] == b"lo"


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_memset_length_too_large():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)


def test_bzero_clears():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"ef"


def test_memchr_finds_first():
    data = b"hello"
    index = memchr(data, ord("l"), len(data))
    assert data[index] == ord("l")
    assert ord("l") not in data[:index]


def test_memchr_respects_length():
    assert memchr(b"hello", ord("o"), 4) is None


def test_memchr_wraps_value():
    assert memchr(b"\x01", 0x101, 1) == 0


def test_memcmp_equal():
    assert memcmp(b"Hello", b"Hello", 5) == 0


def test_memcmp_sign():
    assert memcmp(b"Hello", b"World", 5) < 0
    assert memcmp(b"World", b"Hello", 5) > 0
    assert memcmp(b"Hello", b"hello", 5) < 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_antisymmetric():
    a, b = b"abcx", b"abcz"
    assert memcmp(a, b, 4) == -memcmp(b, a, 4)


def test_memcmp_partial_length_ignores_tail():
    assert memcmp(b"abcx", b"abcz", 3) == 0


def test_memcpy_copies_prefix():
    dest = bytearray(b"xxxxxx")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == b"abcxxx"


def test_memcpy_rejects_short_source():
    with pytest.raises(IndexError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == b"cdefef"


def test_memmove_out_of_bounds():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_calloc_zeroed_length():
    block = calloc(3, 4)
    assert len(block) == 12
    assert block == bytes(12)


def test_calloc_zero_count():
    assert calloc(0, 8) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)