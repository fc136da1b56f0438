"""Reader for XPM pixmaps into 0xAARRGGBB pixel grids."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from cubtools.colors import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value for the ``None`` colour; the alpha byte marks transparency."""

_NAME_BUFFER = 64
_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_DEC_NUMBER = re.compile(r"\s*([+-]?\d+)")
_QUOTED = re.compile(r'"([^"]*)"')
_WORD_SEPARATORS = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap; ``pixels`` holds rows of 0xAARRGGBB values."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _atoi(text: str) -> int:
    match = _DEC_NUMBER.match(text)
    return int(match.group(1)) if match else 0


def _hex_value(text: str) -> int:
    match = _HEX_NUMBER.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits, 16)
    return _to_int32(-value if sign == "-" else value)


def _find_unquoted(text: str, token: str) -> int:
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Blank out C comments lying outside double quotes, keeping the length."""
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 2)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 1)
    return text


def split_words(text: str) -> list[str]:
    """Split on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def parse_color(name: str, end: str | None = None) -> int:
    """Resolve an XPM colour spec to an int.

    ``#RRGGBB`` is read as hexadecimal; otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up by colour name.  Unknown
    names give 0 and ``None`` gives -1.
    """
    if name.startswith("#"):
        return _hex_value(name[1:])
    if end is not None:
        name = f"{name} {end}"[: _NAME_BUFFER - 1]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"malformed XPM header: {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header values: {line!r}")
    return width, height, ncolors, cpp


def _color_entry(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        key_index = words.index("c")
    except ValueError:
        raise XpmError(f"colour line without a 'c' key: {line!r}") from None
    if key_index + 1 >= len(words):
        raise XpmError(f"colour line without a colour: {line!r}")
    name = words[key_index + 1]
    end = words[key_index + 2] if key_index + 2 < len(words) else None
    return line[:cpp], parse_color(name, end)


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == -1 else color & 0xFFFFFFFF


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM from its quoted strings: header, colours, then pixel rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _header(_next_line(source, "header"))

    # Short keys behave as a direct table (later definitions win);
    # longer keys are searched in order (the first definition wins).
    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, value = _color_entry(_next_line(source, "colour definitions"), cpp)
        if direct:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel rows")
        rows.append(
            tuple(
                _pixel_value(palette.get(line[x * cpp : (x + 1) * cpp], 0))
                for x in range(width)
            )
        )
    return XpmImage(width, height, tuple(rows))


def xpm_from_text(text: str) -> XpmImage:
    """Decode the text of an XPM file, comments included."""
    return parse_xpm(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    return xpm_from_text(Path(path).read_text(encoding="latin-1"))