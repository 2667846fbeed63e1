# Purpose: Shared plumbing for workspace file stores: path resolution, raw I/O,
# line edits and translation of every failure into an OperationResult.
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, Union

from editing import (
    InvalidLineNumberError,
    LineEditError,
    LineNotFoundError,
    find_matching_lines,
    insert_line,
    join_lines,
    replace_line,
    split_lines,
)
from models.results import ErrorKind, OperationResult

from ._paths import resolve_inside

logger = logging.getLogger(__name__)

_GERUNDS = {
    "read": "reading",
    "write": "writing",
    "create": "creating",
    "delete": "deleting",
    "list": "listing",
    "modify": "modifying",
    "search": "searching",
    "format": "formatting",
}

_EDIT_KINDS = {
    InvalidLineNumberError: ErrorKind.INVALID_LINE_NUMBER,
    LineNotFoundError: ErrorKind.LINE_NOT_FOUND,
}


class BaseFileStore:
    """Operations common to plain and JSON-validating stores.

    A store owns one base directory, fixed at construction. Subclasses name
    what they store via ``noun`` (used in result messages) and ``subject``
    (used in "not found" style errors).
    """

    noun = "file"
    subject = "File"
    # "added line 3 to file" vs "added line 3 in database"
    insert_preposition = "to"

    def __init__(self, base_directory: Union[str, Path]):
        self._base = Path(base_directory).expanduser().resolve()

    @property
    def base_directory(self) -> Path:
        return self._base

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._base)!r})"

    # -- result helpers -------------------------------------------------

    def _object(self, action: str) -> str:
        return f"{self.noun}s" if action == "list" else self.noun

    def _failure_label(self, action: str) -> str:
        return f"Failed to {action} {self._object(action)}"

    def _fail(self, action: str, kind: ErrorKind, error: str) -> OperationResult[Any]:
        return OperationResult.fail(kind, error, self._failure_label(action))

    def _not_found(self, action: str, path: str) -> OperationResult[Any]:
        return self._fail(action, ErrorKind.NOT_FOUND, f"{self.subject} not found: {path}")

    def _guarded(self, action: str, path: str, fn: Callable[[Path], OperationResult[Any]]) -> OperationResult[Any]:
        try:
            return fn(resolve_inside(self._base, path))
        except PermissionError as exc:
            logger.warning("Denied %s of %r under %s: %s", action, path, self._base, exc)
            return self._fail(action, ErrorKind.ACCESS_DENIED, str(exc))
        except LineEditError as exc:
            return self._fail(action, _EDIT_KINDS.get(type(exc), ErrorKind.INVALID_LINE_NUMBER), str(exc))
        except Exception as exc:
            logger.exception("Unexpected error while %s %s %r", _GERUNDS[action], self.noun, path)
            return self._fail(
                action,
                ErrorKind.UNEXPECTED,
                f"Error {_GERUNDS[action]} {self._object(action)}: {exc}",
            )

    # -- raw I/O --------------------------------------------------------

    @staticmethod
    def _read_text(target: Path) -> str:
        with open(target, "r", encoding="utf-8-sig", newline="") as handle:
            return handle.read()

    @staticmethod
    def _write_text(target: Path, content: str, *, exclusive: bool = False) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "x" if exclusive else "w", encoding="utf-8", newline="") as handle:
            handle.write(content)

    @staticmethod
    def _read_lines(target: Path) -> List[str]:
        with open(target, "r", encoding="utf-8-sig") as handle:
            return split_lines(handle.read())

    @staticmethod
    def _write_lines(target: Path, lines: List[str]) -> None:
        # text mode turns "\n" into the platform line terminator
        with open(target, "w", encoding="utf-8") as handle:
            handle.writelines(f"{line}\n" for line in lines)

    # -- operations -----------------------------------------------------

    def read(self, path: str) -> OperationResult[str]:
        def op(target: Path) -> OperationResult[str]:
            if not target.is_file():
                return self._not_found("read", path)
            content = self._read_text(target)
            return OperationResult.ok(content, f"Successfully read {self.noun}: {path}")

        return self._guarded("read", path, op)

    def _store(self, action: str, path: str, content: str, *, exclusive: bool,
               check: Optional[Callable[[str], bool]] = None) -> OperationResult[str]:
        past = "wrote" if action == "write" else "created"

        def op(target: Path) -> OperationResult[str]:
            if exclusive and target.exists():
                return self._fail(action, ErrorKind.ALREADY_EXISTS, f"{self.subject} already exists: {path}")
            if check is not None and not check(content):
                return self._fail(action, ErrorKind.INVALID_CONTENT, "Invalid JSON content provided")
            try:
                self._write_text(target, content, exclusive=exclusive)
            except FileExistsError:
                return self._fail(action, ErrorKind.ALREADY_EXISTS, f"{self.subject} already exists: {path}")
            logger.debug("%s %s %s (%d chars)", past.capitalize(), self.noun, target, len(content))
            return OperationResult.ok(content, f"Successfully {past} {self.noun}: {path}")

        return self._guarded(action, path, op)

    def _edit(self, path: str, line_number: int, content: str, *, replace: bool,
              check: Optional[Callable[[str], bool]] = None) -> OperationResult[str]:
        def op(target: Path) -> OperationResult[str]:
            if not target.is_file():
                return self._not_found("modify", path)
            lines = self._read_lines(target)
            if replace:
                edited = replace_line(lines, line_number, content)
            else:
                edited = insert_line(lines, line_number, content)
            modified = join_lines(edited)
            if check is not None and not check(modified):
                logger.info("Rejected edit of line %d in %s: result is not valid JSON", line_number, target)
                return self._fail(
                    "modify",
                    ErrorKind.RESULTING_CONTENT_INVALID,
                    "The modification would create invalid JSON. "
                    "Please check the content and line position.",
                )
            self._write_lines(target, edited)
            verb = "replaced" if replace else "added"
            preposition = "in" if replace else self.insert_preposition
            logger.debug("Committed %s line %d in %s", verb, line_number, target)
            return OperationResult.ok(
                modified, f"Successfully {verb} line {line_number} {preposition} {self.noun}: {path}"
            )

        return self._guarded("modify", path, op)

    def search(self, path: str, text: str) -> OperationResult[List[int]]:
        def op(target: Path) -> OperationResult[List[int]]:
            if not target.is_file():
                return self._not_found("search", path)
            matches = find_matching_lines(self._read_lines(target), text)
            return OperationResult.ok(
                matches, f"Found {len(matches)} matching lines in {self.noun}: {path}"
            )

        return self._guarded("search", path, op)


__all__ = ["BaseFileStore"]
