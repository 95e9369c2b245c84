import io

from aoc2021.util import load_lines


def test_load_lines_counts_lines():
    reader = io.StringIO("line 1\nline 2\nline 3\n")
    lines = load_lines(reader)
    assert len(lines) == 3
    assert lines == ["line 1", "line 2", "line 3"]


def test_load_lines_keeps_last_line_without_newline():
    assert load_lines(io.StringIO("a\nb")) == ["a", "b"]


def test_load_lines_strips_carriage_returns():
    assert load_lines(io.StringIO("a\r\nb\r\n")) == ["a", "b"]


def test_load_lines_keeps_blank_lines():
    assert load_lines(io.StringIO("a\n\nb\n")) == ["a", "", "b"]


def test_load_lines_empty_input():
    assert load_lines(io.StringIO("")) == []