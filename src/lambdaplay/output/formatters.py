"""Output mode dispatch for DemoResult.

The CLI renders results for humans (Rich, every line), for scripts
(``--quiet``, result lines only), or for machines (``--json``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from lambdaplay.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from lambdaplay.services.result import DemoResult


class OutputSettings(BaseModel):
    """Output flags resolved from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None


def format_result(result: DemoResult, *, settings: OutputSettings | None = None) -> str:
    """Format a DemoResult according to *settings* (JSON wins over quiet)."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
