# Purpose: Environment driven configuration and workspace directory layout.
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    workspace_path: str = Field(min_length=1, description="Root folder the agent may touch")
    code_dir: str = Field("code", min_length=1)
    database_dir: str = Field("database", min_length=1)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper() or "INFO"
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@dataclass(frozen=True, slots=True)
class WorkspaceLayout:
    root: Path
    code: Path
    database: Path


def load_settings(
    workspace: Optional[str] = None,
    *,
    log_level: Optional[str] = None,
    env_file: Optional[str] = None,
) -> Settings:
    """Build settings from the environment, reading ``.env`` first when present.

    ``workspace`` overrides ``AGENT_WORKSPACE_PATH`` and ``log_level`` overrides
    ``AGENT_LOG_LEVEL``. A missing workspace or unknown level raises pydantic's
    ``ValidationError``.
    """
    load_dotenv(env_file)
    return Settings(
        workspace_path=workspace or os.getenv("AGENT_WORKSPACE_PATH", ""),
        code_dir=os.getenv("AGENT_CODE_DIR", "code"),
        database_dir=os.getenv("AGENT_DATABASE_DIR", "database"),
        log_level=log_level or os.getenv("AGENT_LOG_LEVEL", "INFO"),
    )


def setup_workspace(settings: Settings) -> WorkspaceLayout:
    root = Path(settings.workspace_path).expanduser().resolve()
    code = root / settings.code_dir
    database = root / settings.database_dir
    for folder in (root, code, database):
        folder.mkdir(parents=True, exist_ok=True)
    return WorkspaceLayout(root=root, code=code, database=database)
