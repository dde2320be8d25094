"""Tests for checker utilities."""

from code_quality_checker.utils import (
    extract_line_number,
    extract_line_numbers,
    format_line_message,
    split_lines,
    trim_line,
)


def test_split_lines_naive():
    assert split_lines("") == [""]
    assert split_lines("a\n") == ["a", ""]
    assert split_lines("a\r\nb") == ["a\r", "b"]


def test_line_message_round_trip():
    assert extract_line_number(format_line_message(7, "x")) == 7
    assert extract_line_number("line 12 : spaced") == 12
    assert extract_line_number("no number here") is None


def test_extract_line_numbers_distinct_in_order():
    messages = ["Line 3: a", "Line 1: b", "Line 3: c", "junk"]
    assert extract_line_numbers(messages) == [3, 1]



def test_trim_line_matches_javascript_trim():
    assert trim_line("\ufeff  x \t\u3000") == "x"
    assert trim_line("\x1fx\x85") == "\x1fx\x85"
