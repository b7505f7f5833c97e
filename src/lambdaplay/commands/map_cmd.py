"""Command: the transform demo."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lambdaplay.commands._base import DemoCommand

if TYPE_CHECKING:
    from lambdaplay.commands._context import AppContext


@click.command(
    "map",
    cls=DemoCommand,
    examples="""\
  lambdaplay map
  lambdaplay -q map""",
)
@click.pass_obj
def map_cmd(app: AppContext) -> None:
    """Map each record to the sum of its two fields."""
    from lambdaplay.services.mapping import TransformDemo

    app.emit(TransformDemo(app.records).run())
