"""Stateless JSON checks on inline content."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from editing import format_json, validate_json
from models.results import ErrorKind, OperationResult
from tool_registry import ToolRegistry, ToolSpec


class JsonContentParams(BaseModel):
    content: str = Field(description="JSON text to inspect")


class JsonFormatParams(BaseModel):
    content: str = Field(description="JSON text to re-indent")
    indent: int = Field(2, ge=0, le=8, description="Spaces per indentation level")


async def validate(content: str) -> Dict[str, Any]:
    valid = validate_json(content)
    message = "Content is valid JSON" if valid else "Content is not valid JSON"
    return OperationResult.ok(valid, message).envelope()


async def format_content(content: str, indent: int = 2) -> Dict[str, Any]:
    try:
        formatted = format_json(content, indent=indent)
    except ValueError as exc:
        return OperationResult.fail(ErrorKind.INVALID_CONTENT, str(exc), "Failed to format JSON").envelope()
    return OperationResult.ok(formatted, "Successfully formatted JSON").envelope()


def build_tools(registry: ToolRegistry) -> List[ToolSpec]:
    return [
        ToolSpec(
            name="json.validate",
            model=JsonContentParams,
            handler=validate,
            description="Check whether text is syntactically valid JSON.",
            instructions="Provide 'content'; data is true or false.",
        ),
        ToolSpec(
            name="json.format",
            model=JsonFormatParams,
            handler=format_content,
            description="Pretty-print JSON with consistent indentation.",
            instructions="Provide 'content'; optional 'indent'.",
        ),
    ]
