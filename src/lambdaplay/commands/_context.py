"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the fixed demo input and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING

import click

from lambdaplay.domain.records import Record, default_records
from lambdaplay.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from lambdaplay.config.settings import LambdaplaySettings
    from lambdaplay.services.result import DemoResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The demo records are built here once per invocation and handed to each
    demo; nothing else holds on to them.
    """

    def __init__(self, settings: LambdaplaySettings) -> None:
        self.settings = settings
        self.records: tuple[Record, ...] = tuple(default_records())

        from lambdaplay.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from lambdaplay.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )

    def emit(self, result: DemoResult) -> None:
        """Format and output a DemoResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def emit_all(self, results: Sequence[DemoResult]) -> None:
        """Emit several results in order; JSON mode writes a single array."""
        if not self.settings.json_output:
            for result in results:
                self.emit(result)
            return

        payload = json.dumps([r.model_dump(mode="json") for r in results], indent=2)
        if all(r.ok for r in results):
            click.echo(payload)
        else:
            click.echo(payload, err=True)
            raise SystemExit(1)
