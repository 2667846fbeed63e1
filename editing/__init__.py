# Purpose: Line editing, text search and JSON helpers with no filesystem access.
from __future__ import annotations

from .json_text import format_json, validate_json
from .lines import (
    InvalidLineNumberError,
    LineEditError,
    LineNotFoundError,
    insert_line,
    join_lines,
    replace_line,
    split_lines,
)
from .search import find_matching_lines

__all__ = [
    "InvalidLineNumberError",
    "LineEditError",
    "LineNotFoundError",
    "find_matching_lines",
    "format_json",
    "insert_line",
    "join_lines",
    "replace_line",
    "split_lines",
    "validate_json",
]
