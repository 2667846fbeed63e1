"""JSON database tools. Every change is validated before it reaches disk."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from stores import ValidatingFileStore
from tool_registry import ToolRegistry, ToolSpec

_PATH_HELP = "Path to the JSON file, relative to the database directory"


class DbPathParams(BaseModel):
    file_path: str = Field(min_length=1, description=_PATH_HELP)


class DbWriteParams(BaseModel):
    file_path: str = Field(min_length=1, description=_PATH_HELP)
    json_content: str = Field(description="Complete JSON document")


class DbEditLineParams(BaseModel):
    file_path: str = Field(min_length=1, description=_PATH_HELP)
    line_number: int = Field(description="Line number to insert/replace at (1-based)")
    content: str = Field(description="Content to insert/replace")
    replace: bool = Field(False, description="If true, replaces the line; if false, inserts a new line")


class DbSearchParams(BaseModel):
    file_path: str = Field(min_length=1, description=_PATH_HELP)
    search_text: str = Field(description="Text to search for (case-insensitive)")


class DbFormatParams(BaseModel):
    file_path: str = Field(min_length=1, description=_PATH_HELP)
    indent: int = Field(2, ge=0, le=8, description="Spaces per indentation level")


def build_tools(registry: ToolRegistry) -> List[ToolSpec]:
    store: ValidatingFileStore | None = registry.ctx.get("database")
    if store is None:
        return []

    async def read(file_path: str) -> Dict[str, Any]:
        return store.read(file_path).envelope()

    async def write(file_path: str, json_content: str) -> Dict[str, Any]:
        return store.write(file_path, json_content).envelope()

    async def create(file_path: str, json_content: str) -> Dict[str, Any]:
        return store.create(file_path, json_content).envelope()

    async def edit_line(file_path: str, line_number: int, content: str, replace: bool = False) -> Dict[str, Any]:
        return store.edit_line(file_path, line_number, content, replace=replace).envelope()

    async def search(file_path: str, search_text: str) -> Dict[str, Any]:
        return store.search(file_path, search_text).envelope()

    async def format_file(file_path: str, indent: int = 2) -> Dict[str, Any]:
        return store.format(file_path, indent=indent).envelope()

    return [
        ToolSpec(
            name="db.read",
            model=DbPathParams,
            handler=read,
            description="Read a JSON database file from the database directory.",
            instructions="Provide 'file_path'.",
        ),
        ToolSpec(
            name="db.write",
            model=DbWriteParams,
            handler=write,
            description="Write JSON content to a database file (validates JSON).",
            instructions="Provide 'file_path' and 'json_content'; invalid JSON is refused.",
        ),
        ToolSpec(
            name="db.create",
            model=DbWriteParams,
            handler=create,
            description="Create a new JSON database file with the specified content (validates JSON).",
            instructions="Provide 'file_path' and 'json_content'; fails if the file exists.",
        ),
        ToolSpec(
            name="db.edit_line",
            model=DbEditLineParams,
            handler=edit_line,
            description="Add or replace a line at a specific position in the JSON database file.",
            instructions=(
                "Provide 'file_path', 'line_number' and 'content'; set replace=true to overwrite. "
                "Edits that would leave invalid JSON are rejected and the file is untouched."
            ),
        ),
        ToolSpec(
            name="db.search",
            model=DbSearchParams,
            handler=search,
            description="Search for text within the JSON database file and return matching 1-based line numbers.",
            instructions="Provide 'file_path' and 'search_text'.",
        ),
        ToolSpec(
            name="db.format",
            model=DbFormatParams,
            handler=format_file,
            description="Re-indent a JSON database file in place.",
            instructions="Provide 'file_path'; optional 'indent'.",
        ),
    ]
