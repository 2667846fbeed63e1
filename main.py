from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from settings import Settings, load_settings
from tool_registry import ToolError
from workspace import build_registry


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Workspace file and JSON database tools")
    p.add_argument(
        "--workspace",
        default=None,
        help="Workspace root (defaults to AGENT_WORKSPACE_PATH).",
    )
    p.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to AGENT_LOG_LEVEL or INFO).",
    )
    sub = p.add_subparsers(dest="command", required=True)
    lst = sub.add_parser("list", help="List registered tools.")
    lst.add_argument("--schema", action="store_true", help="Include argument schemas.")
    call = sub.add_parser("call", help="Invoke a tool and print its result as JSON.")
    call.add_argument("tool", help="Registered tool name, e.g. db.edit_line.")
    call.add_argument(
        "--args",
        default="{}",
        help="Tool arguments as a JSON object.",
    )
    return p.parse_args(argv)


def _load_tool_args(raw: str) -> Dict[str, Any]:
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ToolError(f"--args is not valid JSON: {exc}") from exc
    if not isinstance(value, dict):
        raise ToolError("--args must be a JSON object")
    return value


async def run(args: argparse.Namespace, settings: Settings) -> int:
    registry = build_registry(settings)
    if args.command == "list":
        payload = await registry.call("tool.list", detailed=True, include_schema=args.schema)
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0
    result = await registry.call(args.tool, **_load_tool_args(args.args))
    print(json.dumps(result, indent=2, ensure_ascii=False))
    if isinstance(result, dict) and result.get("success") is False:
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        settings = load_settings(args.workspace, log_level=args.log_level)
    except ValidationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        print(
            "Set AGENT_WORKSPACE_PATH (or --workspace) and a valid AGENT_LOG_LEVEL (or --log-level).",
            file=sys.stderr,
        )
        return 2
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        return asyncio.run(run(args, settings))
    except (ToolError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
