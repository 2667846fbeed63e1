# Purpose: Workspace file tools (plain text, no content validation).
from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from stores import PlainFileStore
from tool_registry import ToolRegistry, ToolSpec


class FilePathParams(BaseModel):
    path: str = Field(min_length=1, description="File path, relative to the workspace root")


class FileWriteParams(BaseModel):
    path: str = Field(min_length=1, description="File path, relative to the workspace root")
    content: str = Field(description="Full text to store")


class FileListParams(BaseModel):
    directory: str = Field(".", description="Directory, relative to the workspace root")


class FileAddLineParams(BaseModel):
    path: str = Field(min_length=1, description="File path, relative to the workspace root")
    line_number: int = Field(description="1-based position the new line will occupy")
    content: str = Field(description="Text of the new line, without a line break")


class FileSearchParams(BaseModel):
    path: str = Field(min_length=1, description="File path, relative to the workspace root")
    search_text: str = Field(description="Text to look for (case-insensitive)")


def build_tools(registry: ToolRegistry) -> List[ToolSpec]:
    store: PlainFileStore | None = registry.ctx.get("files")
    if store is None:
        return []

    async def read(path: str) -> Dict[str, Any]:
        return store.read(path).envelope()

    async def write(path: str, content: str) -> Dict[str, Any]:
        return store.write(path, content).envelope()

    async def create(path: str, content: str) -> Dict[str, Any]:
        return store.create(path, content).envelope()

    async def delete(path: str) -> Dict[str, Any]:
        return store.delete(path).envelope()

    async def list_files(directory: str = ".") -> Dict[str, Any]:
        return store.list_files(directory).envelope()

    async def add_line(path: str, line_number: int, content: str) -> Dict[str, Any]:
        return store.edit_line(path, line_number, content).envelope()

    async def search(path: str, search_text: str) -> Dict[str, Any]:
        return store.search(path, search_text).envelope()

    return [
        ToolSpec(
            name="file.read",
            model=FilePathParams,
            handler=read,
            description="Read a text file from the workspace root or a subfolder.",
            instructions="Provide 'path'; data is the file content.",
        ),
        ToolSpec(
            name="file.write",
            model=FileWriteParams,
            handler=write,
            description="Write content to a file, creating directories as needed.",
            instructions="Provide 'path' and 'content'; existing files are overwritten.",
        ),
        ToolSpec(
            name="file.create",
            model=FileWriteParams,
            handler=create,
            description="Create a new file with content. Fails if the file exists.",
            instructions="Provide 'path' and 'content'.",
        ),
        ToolSpec(
            name="file.delete",
            model=FilePathParams,
            handler=delete,
            description="Delete a file.",
            instructions="Provide 'path'.",
        ),
        ToolSpec(
            name="file.list",
            model=FileListParams,
            handler=list_files,
            description="List files in a directory.",
            instructions="Optional 'directory'; data is a list of file names.",
        ),
        ToolSpec(
            name="file.add_line",
            model=FileAddLineParams,
            handler=add_line,
            description="Insert a line at a specific position in a file (1-based index).",
            instructions="Provide 'path', 'line_number' and 'content'; data is the new file content.",
        ),
        ToolSpec(
            name="file.search",
            model=FileSearchParams,
            handler=search,
            description="Search for text within a file and return 1-based line numbers where it appears.",
            instructions="Provide 'path' and 'search_text'.",
        ),
    ]
