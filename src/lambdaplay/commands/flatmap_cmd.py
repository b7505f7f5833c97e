"""Command: the flat-map demo."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lambdaplay.commands._base import DemoCommand

if TYPE_CHECKING:
    from lambdaplay.commands._context import AppContext


@click.command(
    "flatmap",
    cls=DemoCommand,
    examples="""\
  lambdaplay flatmap
  lambdaplay --json flatmap""",
)
@click.pass_obj
def flatmap_cmd(app: AppContext) -> None:
    """Compare a one-to-one projection with expand-and-flatten."""
    from lambdaplay.services.flatmap import FlatMapDemo

    app.emit(FlatMapDemo(app.records).run())
