# cubtools

A collection of plain-Python utilities with no third-party dependencies.

## Modules

### `cubtools.colors`

X11 colour names.

- `lookup_color(name)` returns the 0xRRGGBB value for a name and ignores case,
  so `"Dark Orange"` and `"darkorange"` both work. The name `none` gives -1.
  An unknown name raises `KeyError`.
- `color_names()` returns every known name once, in table order.

### `cubtools.xpm`

An XPM pixmap reader.

- `load_xpm(path)` reads and decodes a file.
- `xpm_from_text(text)` decodes XPM source text. C comments outside quotes are
  ignored, and the quoted strings are taken in order.
- `parse_xpm(lines)` decodes an iterable of XPM strings that have already been
  extracted: the header `"width height ncolors chars_per_pixel"`, then the
  colour lines, then the pixel rows.
- Each returns a frozen `XpmImage` with `width`, `height` and `pixels`, a tuple
  of rows of 0xAARRGGBB values. `pixel(x, y)` returns one value and raises
  `IndexError` when the point lies outside the image. The colour `None` becomes
  `TRANSPARENT` (0xFF000000), because the alpha byte marks transparency.
- Malformed data raises `XpmError`, a subclass of `ValueError`.
- Helpers: `strip_comments(text)` blanks out comments and keeps the text the
  same length, `split_words(text)` splits on spaces and tabs, and
  `parse_color(name, end=None)` resolves `#RRGGBB` or a colour name. An unknown
  name gives 0.

### `cubtools.lines`

- `LineReader(stream, buffer_size=1024)` reads lines from a binary or text
  stream in fixed-size chunks. Each line keeps its trailing newline.
  `read_line()` returns `None` once the stream is exhausted. Iterating the
  reader yields the lines.
- `read_lines(stream)` returns a list of every remaining line.

### `cubtools.chars`

ASCII classification and case mapping:

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` classify a
  character.
- `to_upper` and `to_lower` change the case of a letter.

Each accepts a one-character string or an integer code. `to_upper` and
`to_lower` return the same type they were given.

### `cubtools.memory`

Helpers for `bytearray` buffers:

- `memset`, `bzero`, `memchr`, `memcmp` and `memcpy` work on the first
  `length` bytes of a buffer.
- `memmove(buffer, dest, src, length)` moves bytes inside one buffer and
  handles overlapping regions.
- `calloc(count, size)` returns a zeroed buffer and raises `OverflowError`
  beyond a 64-bit size.

A length that runs past the end of a buffer raises `IndexError`.

### `cubtools.numbers`

- `long_atoi(text)` parses a leading decimal number. It skips leading
  whitespace and accepts one sign. A value that overflows is clamped to
  `LONG_MAX` or `LONG_MIN`.
- `atoi(text)` returns the same value truncated to a 32-bit int.
- `itoa(n)` formats a 32-bit int and raises `OverflowError` outside that range.

### `cubtools.strutil`

- `split(text, sep)` splits on one character and drops empty words.
- `substr(text, start, length)` returns part of a string.
- `strtrim(text, charset)` removes the given characters from both ends.
- `strjoin(first, second)` joins two strings.
- `strnstr(haystack, needle, length)`, `strchr(text, char)` and
  `strrchr(text, char)` return an index, or `None` when there is no match.
- `strncmp(first, second, length)` compares by code point.
- `strlcpy(src, size)` and `strlcat(dst, src, size)` return the resulting text
  together with the length they tried to create.
- `strmapi(text, func)` builds a new string from `func(index, char)`.
- `striteri(seq, func)` replaces each item of a mutable sequence in place.

### `cubtools.output`

- `format_printf(fmt, *args)` supports `%c %s %p %d %i %u %x %X %%`.
  - An unknown conversion is copied unchanged.
  - `%s` of `None` prints `(null)`.
  - `%p` of 0 prints `(nil)`.
  - Too few arguments raises `TypeError`.
- `write_formatted(stream, fmt, *args)` and `print_formatted(fmt, *args)` write
  the formatted text and return the number of characters written.
- `format_number(value, digits)` writes a non-negative number in any base.
- `format_pointer(value)` formats an address.
- `put_char`, `put_str`, `put_endl` and `put_nbr` write to a stream, or to
  standard output when none is given.

### `cubtools.linkedlist`

`LinkedList(values=())` is a singly linked list of `Node` objects. Each node
has `value` and `next`. The list provides:

- `add_front(value)` and `add_back(value)`, which return the new node.
- `head` and `last()`.
- `clear(delete=None)`, which passes each value to `delete` when one is given.
- `iterate(func)`.
- `map(func)`, which returns a new list.
- `len()` and iteration.

## Example

```python
from cubtools.colors import lookup_color
from cubtools.xpm import xpm_from_text
from cubtools.output import format_printf

print(hex(lookup_color("Dark Orange")))   # 0xff8c00

image = xpm_from_text('''
static char *img[] = {
"2 1 2 1",
"a c #ff0000",
"b c blue",
"ab"
};
''')
print(hex(image.pixel(0, 0)), hex(image.pixel(1, 0)))   # 0xff0000 0xff

print(format_printf("%s has %d items at %p", "box", 3, 255))
# box has 3 items at 0xff
```

## What it does not do

The package only decodes images into pixel values. It does not open windows,
draw to the screen or handle keyboard and mouse input, and it provides no
command-line program.

## Tests

```
pip install -e .[test]
pytest
```