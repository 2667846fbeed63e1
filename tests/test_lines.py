import pytest

from editing import (
    InvalidLineNumberError,
    LineNotFoundError,
    find_matching_lines,
    insert_line,
    join_lines,
    replace_line,
    split_lines,
)

LINES = ["{", '  "name": "test",', '  "value": 123', "}"]


def test_split_lines_handles_all_terminators():
    assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]
    assert split_lines("a\nb\n") == ["a", "b"]
    assert split_lines("a\n\n") == ["a", ""]
    assert split_lines("") == []
    assert join_lines(["a", "b"]) == "a\nb"


@pytest.mark.parametrize("line_number", [1, 2, 4, 5])
def test_insert_line_grows_by_one(line_number):
    result = insert_line(LINES, line_number, "new")
    assert len(result) == len(LINES) + 1
    assert result[line_number - 1] == "new"
    assert result[: line_number - 1] == LINES[: line_number - 1]
    assert result[line_number:] == LINES[line_number - 1 :]


def test_insert_line_does_not_mutate_input():
    original = list(LINES)
    insert_line(LINES, 2, "new")
    replace_line(LINES, 2, "new")
    assert LINES == original


def test_insert_into_empty_sequence():
    assert insert_line([], 1, "only") == ["only"]


@pytest.mark.parametrize("line_number", [0, -3])
def test_insert_and_replace_reject_numbers_below_one(line_number):
    with pytest.raises(InvalidLineNumberError):
        insert_line(LINES, line_number, "x")
    with pytest.raises(InvalidLineNumberError):
        replace_line(LINES, line_number, "x")


def test_insert_past_end_is_rejected_not_padded():
    with pytest.raises(InvalidLineNumberError, match="past the end"):
        insert_line(LINES, 6, "x")


def test_replace_line_keeps_length():
    result = replace_line(LINES, 4, "]")
    assert len(result) == len(LINES)
    assert result[3] == "]"
    assert result[:3] == LINES[:3]


def test_replace_line_beyond_end_is_line_not_found():
    with pytest.raises(LineNotFoundError, match="Line 5 does not exist"):
        replace_line(LINES, 5, "x")


def test_find_matching_lines_is_case_insensitive_and_ordered():
    lines = [
        "First line",
        "Second line with search",
        "Third line",
        "Fourth line with SEARCH",
    ]
    assert find_matching_lines(lines, "search") == [2, 4]
    assert find_matching_lines(lines, "nothing here") == []
    assert find_matching_lines(lines, "") == [1, 2, 3, 4]
    assert find_matching_lines(lines, "LINE") == [1, 2, 3, 4]


def test_find_matching_lines_compares_character_by_character():
    assert find_matching_lines(["Straße"], "ss") == []
    assert find_matching_lines(["STRASSE", "straße"], "STRAß") == [2]
