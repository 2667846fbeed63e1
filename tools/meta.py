"""Meta-tools for inspecting the registry itself."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from tool_registry import ToolRegistry, ToolSpec


class ToolListParams(BaseModel):
    detailed: bool = Field(
        False, description="Include descriptions and instructions for each tool"
    )
    include_schema: bool = Field(
        False, description="When true, include JSON schema for arguments"
    )


class ToolInfoParams(BaseModel):
    tool_name: str = Field(..., description="Registered tool name")
    include_schema: bool = Field(
        False, description="When true, include JSON schema for arguments"
    )


def _slim(meta: Dict[str, Any], *, include_schema: bool) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "name": meta.get("name"),
        "description": meta.get("description"),
        "instructions": meta.get("instructions"),
    }
    if include_schema:
        payload["schema"] = meta.get("schema")
    return payload


def build_tools(registry: ToolRegistry) -> List[ToolSpec]:
    async def tool_list(detailed: bool = False, include_schema: bool = False) -> Dict[str, Any]:
        """Return available tool names with optional metadata."""
        meta = registry.describe()
        if not detailed and not include_schema:
            return {"tools": [entry.get("name") for entry in meta]}
        return {"tools": [_slim(entry, include_schema=include_schema) for entry in meta]}

    async def tool_info(tool_name: str, include_schema: bool = False) -> Dict[str, Any]:
        """Return metadata for a single tool."""
        for entry in registry.describe():
            if entry.get("name") == tool_name:
                return _slim(entry, include_schema=include_schema)
        raise ValueError(f"Unknown tool: {tool_name}")

    return [
        ToolSpec(
            name="tool.list",
            model=ToolListParams,
            handler=tool_list,
            description="Enumerate registered tools",
            instructions="Set detailed=true for descriptions; include_schema adds JSON schema",
        ),
        ToolSpec(
            name="tool.info",
            model=ToolInfoParams,
            handler=tool_info,
            description="Fetch metadata for a specific tool",
            instructions="Provide 'tool_name'; optional include_schema",
        ),
    ]
