import pytest

from aoc2025.util.files import read_lines


def test_reads_lines_without_newlines(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"first\nsecond\n")
    assert read_lines(path) == ["first", "second"]


def test_last_line_without_newline(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"first\nsecond")
    assert read_lines(path) == ["first", "second"]


def test_crlf_endings_are_stripped(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"a\r\nb\r\n")
    assert read_lines(path) == ["a", "b"]


def test_blank_lines_are_kept(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"1-2\n\n5\n")
    assert read_lines(path) == ["1-2", "", "5"]


def test_empty_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"")
    assert read_lines(path) == []


def test_accepts_string_path(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("x\n", encoding="utf-8")
    assert read_lines(str(path)) == ["x"]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.txt")