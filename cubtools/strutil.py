"""String helpers with bounded-buffer semantics: split, trim, search, copy."""

from __future__ import annotations

from typing import Callable, MutableSequence, TypeVar

_Item = TypeVar("_Item")
_NUL = "\0"


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    return [word for word in text.split(_single_char(sep)) if word]


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    return text[start : start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters by code point.

    Returns the difference of the first differing pair (a missing character
    counts as 0), or 0 when the compared parts are equal.
    """
    _non_negative("length", length)
    for i in range(length):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    index = text.find(_single_char(char))
    if index < 0:
        return len(text) if char == _NUL else None
    return index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    if _single_char(char) == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits and the full length of ``src``; a result
    shorter than that length means the copy was truncated.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create: the
    length of ``dst`` (capped at ``size``) plus the length of ``src``.
    """
    _non_negative("size", size)
    dst_len = min(len(dst), size)
    room = size - dst_len
    if len(src) < room:
        result = dst + src
    elif room > 0:
        result = dst + src[: room - 1]
    else:
        result = dst
    return result, dst_len + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character.

    A NUL returned by ``func`` ends the result.
    """
    mapped = "".join(func(i, char) for i, char in enumerate(text))
    return mapped.split(_NUL, 1)[0]


def striteri(
    text: MutableSequence[_Item], func: Callable[[int, _Item], _Item]
) -> MutableSequence[_Item]:
    """Replace each item of ``text`` in place with ``func(index, item)``."""
    for i, item in enumerate(text):
        text[i] = func(i, item)
    return text