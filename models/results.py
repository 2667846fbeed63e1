# Purpose: Structured tool outcomes and the error taxonomy shared by every store.

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, Field, model_validator

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Why a store operation failed."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_LINE_NUMBER = "invalid_line_number"
    LINE_NOT_FOUND = "line_not_found"
    INVALID_CONTENT = "invalid_content"
    RESULTING_CONTENT_INVALID = "resulting_content_invalid"
    ACCESS_DENIED = "access_denied"
    UNEXPECTED = "unexpected"


class OperationError(Exception):
    """Raised by ``OperationResult.unwrap`` for callers that prefer exceptions."""

    def __init__(self, kind: ErrorKind, error: str, message: str = ""):
        super().__init__(error)
        self.kind = kind
        self.error = error
        self.message = message


class OperationResult(BaseModel, Generic[T]):
    """Either a success carrying ``data`` or a failure carrying ``error``.

    ``message`` is always a short human readable summary. Use :meth:`ok` and
    :meth:`fail` rather than the constructor.
    """

    success: bool
    message: str = Field(min_length=1)
    data: Optional[T] = None
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None

    @model_validator(mode="after")
    def _one_branch(self) -> "OperationResult[T]":
        if self.success:
            if self.error is not None or self.kind is not None:
                raise ValueError("successful result cannot carry an error")
        else:
            if not self.error or self.kind is None:
                raise ValueError("failed result needs an error and a kind")
            if self.data is not None:
                raise ValueError("failed result cannot carry data")
        return self

    @classmethod
    def ok(cls, data: T, message: str = "Operation completed successfully") -> "OperationResult[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(
        cls, kind: ErrorKind, error: str, message: str = "Operation failed"
    ) -> "OperationResult[T]":
        return cls(success=False, message=message, error=error, kind=kind)

    def unwrap(self) -> T:
        if not self.success:
            raise OperationError(self.kind or ErrorKind.UNEXPECTED, self.error or "", self.message)
        return self.data  # type: ignore[return-value]

    def envelope(self) -> Dict[str, Any]:
        """Payload handed back to the tool-calling layer."""
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "error": self.error,
        }

    def to_json(self) -> str:
        return json.dumps(self.envelope(), ensure_ascii=False)
