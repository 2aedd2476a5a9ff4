import io

import pytest

from wireframe.linereader import LineReader, read_lines

TEXT = "0 0 1\n2 3 4\nlast line without newline"


@pytest.mark.parametrize("size", [1, 2, 3, 15, 1000])
def test_lines_rejoin_to_original(size):
    lines = list(LineReader(io.StringIO(TEXT), size))
    assert "".join(lines) == TEXT
    assert lines == TEXT.splitlines(keepends=True)


def test_default_buffer_size():
    reader = LineReader(io.StringIO("a\nbb\n"))
    assert reader.next_line() == "a\n"
    assert reader.next_line() == "bb\n"
    assert reader.next_line() is None


def test_exhausted_reader_keeps_returning_none():
    reader = LineReader(io.StringIO("x"))
    assert reader.next_line() == "x"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_empty_stream_gives_no_lines():
    assert LineReader(io.StringIO("")).next_line() is None
    assert list(LineReader(io.StringIO(""))) == []


def test_blank_lines_are_kept():
    data = "\n\nz\n"
    assert list(LineReader(io.StringIO(data), 4)) == data.splitlines(keepends=True)


def test_binary_stream():
    data = b"abc\ndef\n"
    lines = list(LineReader(io.BytesIO(data), 2))
    assert lines == data.splitlines(keepends=True)


def test_line_longer_than_buffer():
    data = "x" * 100 + "\n"
    assert list(LineReader(io.StringIO(data), 7)) == [data]


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), size)


def test_read_lines_from_file(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text(TEXT, encoding="utf-8")
    assert read_lines(path) == TEXT.splitlines(keepends=True)


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.fdf")