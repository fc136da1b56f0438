import io

import pytest

from cubtools.lines import LineReader, read_lines


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 1024])
def test_lines_keep_newlines(buffer_size):
    reader = LineReader(io.BytesIO(b"ab\ncd\nef"), buffer_size)
    assert reader.read_line() == b"ab\n"
    assert reader.read_line() == b"cd\n"
    assert reader.read_line() == b"ef"
    assert reader.read_line() is None


def test_empty_stream():
    assert LineReader(io.BytesIO(b"")).read_line() is None


def test_text_stream():
    assert read_lines(io.StringIO("one\ntwo\n")) == ["one\n", "two\n"]


def test_blank_lines():
    assert read_lines(io.BytesIO(b"\n\nx\n")) == [b"\n", b"\n", b"x\n"]


def test_iteration_rebuilds_content():
    data = b"first line\nsecond\n\nlast without newline"
    lines = list(LineReader(io.BytesIO(data), 4))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])


def test_long_line_spanning_many_chunks():
    data = "x" * 5000 + "\ny\n"
    lines = read_lines(io.StringIO(data))
    assert len(lines) == 2
    assert lines[0] == "x" * 5000 + "\n"


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b"a"), 0)


def test_closed_stream_raises():
    stream = io.BytesIO(b"a\n")
    stream.close()
    with pytest.raises(ValueError):
        LineReader(stream).read_line()