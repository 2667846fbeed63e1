"""Non-validating store for arbitrary text files in the workspace."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from models.results import OperationResult

from .base import BaseFileStore

logger = logging.getLogger(__name__)


class PlainFileStore(BaseFileStore):
    noun = "file"
    subject = "File"

    def write(self, path: str, content: str) -> OperationResult[str]:
        """Overwrite ``path`` with ``content``, creating parent directories."""
        return self._store("write", path, content, exclusive=False)

    def create(self, path: str, content: str) -> OperationResult[str]:
        """Create ``path``; fails if anything already exists there."""
        return self._store("create", path, content, exclusive=True)

    def delete(self, path: str) -> OperationResult[str]:
        def op(target: Path) -> OperationResult[str]:
            if not target.is_file():
                return self._not_found("delete", path)
            target.unlink()
            logger.debug("Deleted %s", target)
            return OperationResult.ok("", f"Successfully deleted file: {path}")

        return self._guarded("delete", path, op)

    def list_files(self, directory: str = ".") -> OperationResult[List[str]]:
        """Names of the regular files directly under ``directory``.

        A missing directory is not an error: the result is an empty list.
        """

        def op(target: Path) -> OperationResult[List[str]]:
            if not target.is_dir():
                return OperationResult.ok([], f"Directory not found: {directory}")
            names = sorted(child.name for child in target.iterdir() if child.is_file())
            return OperationResult.ok(names, f"Successfully listed files in directory: {directory}")

        return self._guarded("list", directory, op)

    def edit_line(self, path: str, line_number: int, content: str) -> OperationResult[str]:
        """Insert ``content`` as 1-based line ``line_number``."""
        return self._edit(path, line_number, content, replace=False)
