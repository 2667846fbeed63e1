"""Pytest configuration: asyncio tests without external plugins, plus workspace fixtures."""

from __future__ import annotations

import asyncio
import inspect
from pathlib import Path

import pytest

from settings import Settings
from stores import PlainFileStore, ValidatingFileStore
from tool_registry import ToolRegistry
from workspace import build_registry


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Register the custom ``asyncio`` marker used throughout the test suite."""

    config.addinivalue_line(
        "markers",
        "asyncio: mark a test as running inside an asyncio event loop",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Execute ``async def`` tests by driving them with a fresh event loop."""

    test_function = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_function):
        return None

    argnames = pyfuncitem._fixtureinfo.argnames
    kwargs = {name: pyfuncitem.funcargs[name] for name in argnames}
    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        loop.run_until_complete(test_function(**kwargs))
        loop.run_until_complete(loop.shutdown_asyncgens())
    finally:
        asyncio.set_event_loop(None)
        loop.close()
    return True


@pytest.fixture
def file_store(tmp_path: Path) -> PlainFileStore:
    return PlainFileStore(tmp_path)


@pytest.fixture
def db_store(tmp_path: Path) -> ValidatingFileStore:
    return ValidatingFileStore(tmp_path)


@pytest.fixture
def registry(tmp_path: Path) -> ToolRegistry:
    return build_registry(Settings(workspace_path=str(tmp_path / "workspace")))
