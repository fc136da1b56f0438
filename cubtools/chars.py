"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import TypeVar

_Char = TypeVar("_Char", int, str)


def _code(c: int | str) -> int:
    return ord(c) if isinstance(c, str) else c


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _shift(c: _Char, low: str, high: str, delta: int) -> _Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: _Char) -> _Char:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    return _shift(c, "a", "z", -32)


def to_lower(c: _Char) -> _Char:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    return _shift(c, "A", "Z", 32)