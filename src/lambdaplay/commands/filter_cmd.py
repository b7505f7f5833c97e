"""Command: the filter demo."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lambdaplay.commands._base import DemoCommand

if TYPE_CHECKING:
    from lambdaplay.commands._context import AppContext


@click.command(
    "filter",
    cls=DemoCommand,
    examples="""\
  lambdaplay filter
  lambdaplay --json filter""",
)
@click.pass_obj
def filter_cmd(app: AppContext) -> None:
    """Keep the records whose first field is 1."""
    from lambdaplay.services.filtering import FilterDemo

    app.emit(FilterDemo(app.records).run())
