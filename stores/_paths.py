"""Resolve caller supplied relative paths inside a store's base directory."""

from __future__ import annotations

from pathlib import Path


__all__ = ["resolve_inside"]


def resolve_inside(base: Path, relative: str) -> Path:
    """Join ``relative`` onto ``base`` and refuse anything that lands outside it.

    Absolute and ``~`` paths, ``..`` escapes and symlinks pointing out of ``base`` raise
    ``PermissionError``.
    """
    if relative.startswith("~"):
        raise PermissionError(f"Home-relative paths are not allowed: {relative}")
    candidate = Path(relative)
    if candidate.is_absolute():
        raise PermissionError(f"Absolute paths are not allowed: {relative}")
    root = base.resolve()
    target = (root / candidate).resolve()
    if target == root or root in target.parents:
        return target
    raise PermissionError(f"Path escapes the base directory: {relative}")
