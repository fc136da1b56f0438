"""printf-style formatting and small writers for text streams."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

from cubtools.numbers import itoa

BASE_10 = "0123456789"
BASE_16_UPPER = "0123456789ABCDEF"
BASE_16_LOWER = "0123456789abcdef"

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 0x100000000 if value & 0x80000000 else value


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def format_number(value: int, digits: str) -> str:
    """Write a non-negative integer using ``digits`` as the base's symbols."""
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    if value < 0:
        raise ValueError("value must not be negative")
    out = []
    while True:
        value, rest = divmod(value, base)
        out.append(digits[rest])
        if value == 0:
            break
    return "".join(reversed(out))


def format_pointer(value: int) -> str:
    """Format an address as ``0x`` and lower-case hex, or ``(nil)`` for 0."""
    value &= _ULONG_MASK
    if value == 0:
        return NULL_POINTER
    return "0x" + format_number(value, BASE_16_LOWER)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "c":
        return _char(_next_arg(values, spec))
    if spec == "s":
        return _string(_next_arg(values, spec))
    if spec == "p":
        return format_pointer(int(_next_arg(values, spec)))
    if spec in ("d", "i"):
        return itoa(_to_int32(int(_next_arg(values, spec))))
    if spec == "u":
        return format_number(int(_next_arg(values, spec)) & _UINT_MASK, BASE_10)
    if spec == "x":
        return format_number(int(_next_arg(values, spec)) & _UINT_MASK, BASE_16_LOWER)
    if spec == "X":
        return format_number(int(_next_arg(values, spec)) & _UINT_MASK, BASE_16_UPPER)
    if spec == "%":
        return "%"
    return "%" + spec


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``%c %s %p %d %i %u %x %X %%`` in ``fmt`` with ``args``.

    Unknown conversions are copied as they stand; a lone ``%`` at the end
    is kept.  Raises TypeError for a missing format or too few arguments.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    values = iter(args)
    chars = iter(fmt)
    pieces: list[str] = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def write_formatted(stream: TextIO, fmt: str, *args: Any) -> int:
    """Format and write to ``stream``; return the number of characters written."""
    text = format_printf(fmt, *args)
    stream.write(text)
    return len(text)


def print_formatted(fmt: str, *args: Any) -> int:
    """Format and write to standard output; return the number of characters."""
    return write_formatted(sys.stdout, fmt, *args)


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character."""
    _stream(stream).write(_char(c))


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text``; None writes nothing."""
    if text is None:
        return
    _stream(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` and a newline; None writes nothing."""
    if text is None:
        return
    out = _stream(stream)
    out.write(text)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write a 32-bit int in decimal."""
    _stream(stream).write(itoa(n))