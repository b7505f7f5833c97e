"""DemoResult and DemoError: the envelope every demo returns.

INVARIANT: All demo operations return DemoResult.
The CLI renderers and the JSON output consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class DemoError(BaseModel):
    """Structured error payload within a DemoResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class DemoResult(BaseModel):
    """Universal return type for demo operations.

    Attributes:
        ok: Whether the demo completed.
        op: Demo name (``"filter"``, ``"map"``, ``"reduce"``, ``"flatmap"``).
        data: JSON-safe payload; records are encoded as ``{"first", "second"}``.
        warnings: Non-fatal issues encountered during the demo.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry span tree when verbose).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: DemoError | None = None
    meta: dict[str, Any] | None = None
