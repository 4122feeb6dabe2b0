"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, taskctl.toml only contains
overrides. A fresh project needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """[storage] section. Unknown keys are rejected so typos surface."""

    model_config = {"frozen": True, "extra": "forbid"}

    file: str = Field(default="tasks.json", min_length=1)
    indent: int = Field(default=2, ge=0)
