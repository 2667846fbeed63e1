# Purpose: JSON "database" store; every mutation must leave the file valid JSON.
from __future__ import annotations

import logging
from pathlib import Path

from editing import format_json, validate_json
from models.results import ErrorKind, OperationResult

from .base import BaseFileStore

logger = logging.getLogger(__name__)


class ValidatingFileStore(BaseFileStore):
    """Store for JSON database files.

    Content is checked with ``validate_json`` before anything is written. Line
    edits are applied in memory, validated as a whole document and only then
    persisted, so a rejected edit leaves the file exactly as it was.
    """

    noun = "database"
    subject = "Database file"
    insert_preposition = "in"

    def write(self, path: str, json_content: str) -> OperationResult[str]:
        return self._store("write", path, json_content, exclusive=False, check=validate_json)

    def create(self, path: str, json_content: str) -> OperationResult[str]:
        # existence is reported before content validity
        return self._store("create", path, json_content, exclusive=True, check=validate_json)

    def edit_line(
        self, path: str, line_number: int, content: str, replace: bool = False
    ) -> OperationResult[str]:
        """Insert (or with ``replace=True`` overwrite) 1-based line ``line_number``."""
        return self._edit(path, line_number, content, replace=replace, check=validate_json)

    def format(self, path: str, indent: int = 2) -> OperationResult[str]:
        """Re-indent a stored JSON document in place."""

        def op(target: Path) -> OperationResult[str]:
            if not target.is_file():
                return self._not_found("format", path)
            current = self._read_text(target)
            if not validate_json(current):
                return self._fail(
                    "format", ErrorKind.INVALID_CONTENT, f"Stored content is not valid JSON: {path}"
                )
            formatted = format_json(current, indent=indent)
            self._write_text(target, formatted)
            logger.debug("Formatted %s", target)
            return OperationResult.ok(formatted, f"Successfully formatted database: {path}")

        return self._guarded("format", path, op)
