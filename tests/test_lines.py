import os

import pytest

from ftkit.lines import LineReader, get_next_line

CONTENT = "first line\nsecond\n\nfourth without end"


@pytest.fixture
def open_file(tmp_path):
    descriptors = []

    def _open(text):
        path = tmp_path / f"input{len(descriptors)}.txt"
        path.write_text(text, encoding="utf-8")
        fd = os.open(path, os.O_RDONLY)
        descriptors.append(fd)
        return fd

    yield _open
    for fd in descriptors:
        os.close(fd)


@pytest.mark.parametrize("size", [1, 3, 10, 100])
def test_lines_join_back_to_content(open_file, size):
    lines = list(LineReader(open_file(CONTENT), size))
    assert "".join(lines) == CONTENT


@pytest.mark.parametrize("size", [1, 4, 10, 64])
def test_every_line_but_last_ends_with_newline(open_file, size):
    lines = list(LineReader(open_file(CONTENT), size))
    assert all(line.endswith("\n") for line in lines[:-1])
    assert not lines[-1].endswith("\n")
    assert len(lines) == CONTENT.count("\n") + 1


def test_content_ending_in_newline(open_file):
    text = "a\nbb\nccc\n"
    lines = list(LineReader(open_file(text), 2))
    assert lines == text.splitlines(keepends=True)


def test_read_line_returns_none_at_end(open_file):
    reader = LineReader(open_file("only\n"), 10)
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_input_gives_nothing(open_file):
    reader = LineReader(open_file(""), 5)
    assert reader.read_line() is None
    assert list(reader) == []


def test_reads_from_pipe():
    read_fd, write_fd = os.pipe()
    os.write(write_fd, CONTENT.encode())
    os.close(write_fd)
    try:
        assert "".join(LineReader(read_fd, 7)) == CONTENT
    finally:
        os.close(read_fd)


@pytest.mark.parametrize("size", [0, -1])
def test_rejects_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(0, size)


def test_rejects_negative_fd():
    with pytest.raises(ValueError):
        LineReader(-1, 10)


def test_get_next_line_negative_fd():
    assert get_next_line(-1) is None


def test_get_next_line_reads_whole_file(open_file):
    fd = open_file(CONTENT)
    lines = []
    while (line := get_next_line(fd)) is not None:
        lines.append(line)
    assert lines == CONTENT.splitlines(keepends=True)