"""Integer parsing and formatting with C int and long semantics."""

from __future__ import annotations

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)

_WHITESPACE = " \t\n\v\f\r"


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _parse(text: str) -> tuple[int, int, bool]:
    """Return (sign, magnitude, overflowed) for a leading decimal number."""
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        digit = ord(text[pos]) - ord("0")
        if result > (LONG_MAX - digit) // 10:
            return sign, result, True
        result = result * 10 + digit
        pos += 1
    return sign, result, False


def long_atoi(text: str) -> int:
    """Parse a leading decimal integer as a C long.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit.  Values that would overflow clamp to LONG_MAX or LONG_MIN.
    """
    sign, result, overflowed = _parse(text)
    if overflowed:
        return LONG_MAX if sign == 1 else LONG_MIN
    return result * sign


def atoi(text: str) -> int:
    """Parse a leading decimal integer, truncated to a 32-bit int.

    Beyond the long range the clamped long value is truncated as well.
    """
    return _to_int32(long_atoi(text))


def itoa(n: int) -> str:
    """Format a 32-bit int in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)