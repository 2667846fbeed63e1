# Purpose: Pure, 1-based line insertion and replacement over a list of lines.
from __future__ import annotations

import re
from typing import List, Sequence

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class LineEditError(ValueError):
    """Base class for rejected line edits."""


class InvalidLineNumberError(LineEditError): ...


class LineNotFoundError(LineEditError): ...


def split_lines(text: str) -> List[str]:
    """Split text on any line terminator; a trailing terminator adds no empty line."""
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def join_lines(lines: Sequence[str]) -> str:
    return "\n".join(lines)


def _check_lower_bound(line_number: int) -> None:
    if line_number < 1:
        raise InvalidLineNumberError("Line number must be 1 or greater")


def insert_line(lines: Sequence[str], line_number: int, content: str) -> List[str]:
    """Return a copy of ``lines`` with ``content`` inserted as line ``line_number``.

    Valid positions are 1..len(lines)+1; the last one appends.
    """
    _check_lower_bound(line_number)
    if line_number > len(lines) + 1:
        raise InvalidLineNumberError(
            f"Line {line_number} is past the end of the file "
            f"({len(lines)} lines); insert at 1 to {len(lines) + 1}"
        )
    result = list(lines)
    result.insert(line_number - 1, content)
    return result


def replace_line(lines: Sequence[str], line_number: int, content: str) -> List[str]:
    """Return a copy of ``lines`` with line ``line_number`` replaced."""
    _check_lower_bound(line_number)
    if line_number > len(lines):
        raise LineNotFoundError(f"Line {line_number} does not exist for replacement")
    result = list(lines)
    result[line_number - 1] = content
    return result
