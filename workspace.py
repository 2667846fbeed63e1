# Purpose: Wire stores for one workspace into a ready-to-call tool registry.
from __future__ import annotations

import logging

from settings import Settings, setup_workspace
from stores import PlainFileStore, ValidatingFileStore
from tool_registry import ToolRegistry, autodiscover_tools

logger = logging.getLogger(__name__)


def build_registry(settings: Settings, *, package: str = "tools") -> ToolRegistry:
    """Create the workspace folders and register every tool against them.

    Plain file tools operate on the workspace root, database tools on its
    database subfolder.
    """
    layout = setup_workspace(settings)
    registry = ToolRegistry(
        ctx={
            "layout": layout,
            "files": PlainFileStore(layout.root),
            "database": ValidatingFileStore(layout.database),
        }
    )
    autodiscover_tools(registry, package)
    logger.info("Registered %d tools for workspace %s", len(registry.list()), layout.root)
    return registry
