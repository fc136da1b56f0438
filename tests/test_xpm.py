import pytest

from cubtools.colors import lookup_color
from cubtools.xpm import (
    XpmError,
    XpmImage,
    load_xpm,
    parse_color,
    parse_xpm,
    split_words,
    strip_comments,
    xpm_from_text,
)

SIMPLE = ["3 2 2 1", ". c None", "# c #FF0000", ".#.", "#.#"]

FILE_TEXT = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 2 1",
". c None", // transparent
"# c #FF0000",
/* pixels */
".#.",
"#.#"
};
"""


def test_strip_block_comment_keeps_length():
    text = "a/*x*/b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result
    assert result.replace(" ", "") == "ab"


def test_strip_line_comment():
    result = strip_comments("x // note\ny")
    assert "note" not in result
    assert result.replace(" ", "") == "xy"


def test_comment_inside_quotes_is_kept():
    text = '"/*x*/" "//y"'
    assert strip_comments(text) == text


def test_split_words():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]
    assert split_words(" \t ") == []


def test_parse_color_hex():
    assert parse_color("#FF0000", None) == 0xFF0000


def test_parse_color_hex_wraps_to_int():
    assert parse_color("#FFFFFFFF", None) == -1


def test_parse_color_names():
    assert parse_color("red", None) == lookup_color("red")
    assert parse_color("RED") == lookup_color("red")
    assert parse_color("none", None) == -1


def test_parse_color_two_words():
    assert parse_color("ghost", "white") == lookup_color("ghost white")


def test_parse_color_unknown_is_zero():
    assert parse_color("nosuchcolour", None) == 0


def test_parse_simple_image():
    image = parse_xpm(SIMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.pixel(1, 0) == 0xFF0000
    assert image.pixel(0, 0) == 0xFF000000
    assert image.pixel(0, 1) == image.pixel(2, 1) == image.pixel(1, 0)


def test_parse_wide_keys():
    image = parse_xpm(["2 1 2 3", "aaa c red", "bbb c blue", "aaabbb"])
    assert image.pixel(0, 0) == lookup_color("red")
    assert image.pixel(1, 0) == lookup_color("blue")


def test_rows_have_image_width():
    image = parse_xpm(SIMPLE)
    assert len(image.pixels) == image.height
    assert all(len(row) == image.width for row in image.pixels)


def test_pixel_out_of_range():
    image = parse_xpm(SIMPLE)
    with pytest.raises(IndexError):
        image.pixel(3, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_zero_width_header_is_error():
    with pytest.raises(XpmError):
        parse_xpm(["0 2 2 1", ". c None"])


def test_short_header_is_error():
    with pytest.raises(XpmError):
        parse_xpm(["3 2"])


def test_missing_rows_is_error():
    with pytest.raises(XpmError):
        parse_xpm(SIMPLE[:-1])


def test_colour_line_without_key_is_error():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", ". m white", "."])


def test_text_matches_lines():
    assert xpm_from_text(FILE_TEXT) == parse_xpm(SIMPLE)


def test_load_from_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(FILE_TEXT, encoding="latin-1")
    image = load_xpm(path)
    assert isinstance(image, XpmImage)
    assert image == parse_xpm(SIMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "missing.xpm")