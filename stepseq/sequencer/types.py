"""Shared type definitions for stepseq."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class HaltSnapshot(BaseModel):
    """Read-only view of an executor's halt state after a run."""

    model_config = ConfigDict(frozen=True)

    halted: bool = False
    step: str | None = None
    reason: Any = None
    error_type: str | None = None
