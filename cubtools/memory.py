"""Byte-buffer helpers: fill, search, compare, copy and zeroed allocation."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1
"""Largest allocation size accepted by :func:`calloc`."""


def _check_length(length: int, *buffers: bytes | bytearray | memoryview) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buffer in buffers:
        if length > len(buffer):
            raise IndexError(f"length {length} exceeds buffer of {len(buffer)} bytes")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value`` (low byte only)."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer``."""
    return memset(buffer, 0, length)


def memchr(data: bytes | bytearray, value: int, length: int) -> int | None:
    """Return the index of the first byte equal to ``value`` among the first
    ``length`` bytes, or None when there is none."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, length: int) -> int:
    """Compare the first ``length`` bytes as unsigned values.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_length(length, first, second)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(
    dest: bytearray, src: bytes | bytearray, length: int
) -> bytearray:
    """Copy ``length`` bytes from the start of ``src`` to the start of ``dest``."""
    _check_length(length, dest, src)
    dest[:length] = src[:length]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buffer`` from offset ``src`` to offset
    ``dest``; overlapping regions are handled correctly."""
    if dest < 0 or src < 0:
        raise IndexError("offsets must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if max(dest, src) + length > len(buffer):
        raise IndexError("region extends past the end of the buffer")
    buffer[dest : dest + length] = bytes(buffer[src : src + length])
    return buffer


def calloc(count: int, size: int) -> bytearray:
    """Allocate ``count * size`` zeroed bytes.

    Raises OverflowError when the total does not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError(f"allocation of {count} x {size} bytes overflows")
    return bytearray(total)