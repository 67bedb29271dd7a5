import io

import pytest

from wirefdf.lineread import LineReader, read_lines


@pytest.mark.parametrize("size", [1, 2, 3, 7, 2048])
def test_lines_keep_newlines(size):
    lines = list(read_lines(io.StringIO("a\nbb\nccc"), size))
    assert lines == ["a\n", "bb\n", "ccc"]


@pytest.mark.parametrize("size", [1, 4, 16, 2048])
@pytest.mark.parametrize("text", ["", "\n", "\n\n", "x", "0 1 2\n3 4 5\n", "one\ntwo\nthree\n"])
def test_lines_rejoin_to_input(size, text):
    lines = list(read_lines(io.StringIO(text), size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") <= 1 for line in lines)


def test_empty_stream_has_no_lines():
    assert list(read_lines(io.StringIO(""))) == []


def test_bytes_stream():
    lines = list(read_lines(io.BytesIO(b"1 2\n3 4\n"), 3))
    assert lines == [b"1 2\n", b"3 4\n"]


def test_read_line_returns_none_after_end():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_reader_iterates():
    reader = LineReader(io.StringIO("a\nb\n"), 1)
    assert list(reader) == ["a\n", "b\n"]


def test_line_longer_than_buffer():
    text = "x" * 50 + "\n"
    assert list(read_lines(io.StringIO(text), 4)) == [text]


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), size)