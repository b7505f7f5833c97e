"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, lambdaplay.toml only contains
overrides.  The demo input itself is fixed and is not configurable.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ReduceConfig(BaseModel):
    """[reduce] section."""

    model_config = {"frozen": True}

    partitions: int = Field(default=1, ge=1)
    parallel: bool = False
    max_workers: int = Field(default=2, ge=1)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)


class LambdaplayConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    reduce: ReduceConfig = Field(default_factory=ReduceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
