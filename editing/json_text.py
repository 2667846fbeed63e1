"""Syntactic JSON validation and canonical re-indentation."""

from __future__ import annotations

import json
from typing import Any, Optional


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _parse(content: str) -> Any:
    return json.loads(content, parse_constant=_reject_constant)


def validate_json(content: Optional[str]) -> bool:
    """Return True when ``content`` is one complete, syntactically valid JSON document."""
    if not isinstance(content, str) or not content.strip():
        return False
    try:
        _parse(content)
    except (ValueError, RecursionError):
        return False
    return True


def format_json(content: str, indent: int = 2) -> str:
    if not validate_json(content):
        raise ValueError("Invalid JSON content provided")
    return json.dumps(_parse(content), indent=indent, ensure_ascii=False)
