import io

import pytest

from fdfview.lines import LineReader

SAMPLE = "0 0 0\n0 10 0\n0 0 0\n"


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, 1024])
def test_round_trip_text(buffer_size):
    reader = LineReader(io.StringIO(SAMPLE), buffer_size)
    assert "".join(reader) == SAMPLE


@pytest.mark.parametrize("buffer_size", [1, 4, 1024])
def test_round_trip_bytes(buffer_size):
    data = SAMPLE.encode()
    reader = LineReader(io.BytesIO(data), buffer_size)
    assert b"".join(reader) == data


@pytest.mark.parametrize("buffer_size", [1, 5, 1024])
def test_lines_match_splitlines(buffer_size):
    data = "a\nbb\n\nccc"
    lines = list(LineReader(io.StringIO(data), buffer_size))
    assert lines == data.splitlines(keepends=True)


def test_last_line_without_newline():
    lines = list(LineReader(io.StringIO("one\ntwo"), 3))
    assert lines[-1] == "two"
    assert all(line.endswith("\n") for line in lines[:-1])


def test_empty_source_returns_none():
    reader = LineReader(io.StringIO(""), 8)
    assert reader.next_line() is None


def test_none_after_exhaustion():
    reader = LineReader(io.StringIO("x\n"), 8)
    assert reader.next_line() == "x\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_line_count():
    lines = list(LineReader(io.StringIO(SAMPLE), 4))
    assert len(lines) == SAMPLE.count("\n")


@pytest.mark.parametrize("buffer_size", [0, -1])
def test_invalid_buffer_size(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO(SAMPLE), buffer_size)


def test_buffer_size_is_capped():
    reader = LineReader(io.StringIO(SAMPLE), 5_000_000)
    assert reader.buffer_size == 1000000


def test_default_buffer_size():
    reader = LineReader(io.StringIO(SAMPLE))
    assert reader.buffer_size == 1024