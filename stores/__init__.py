# Purpose: Workspace file stores bound to a single base directory.
from __future__ import annotations

from .base import BaseFileStore
from .plain import PlainFileStore
from .validating import ValidatingFileStore

__all__ = ["BaseFileStore", "PlainFileStore", "ValidatingFileStore"]
