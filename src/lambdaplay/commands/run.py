"""Command: every demo, in order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lambdaplay.commands._base import DemoCommand

if TYPE_CHECKING:
    from lambdaplay.commands._context import AppContext
    from lambdaplay.services.result import DemoResult


def run_demos(app: AppContext) -> list[DemoResult]:
    """Run filter, map, reduce, and flat-map over the shared records."""
    from lambdaplay.commands.reduce_cmd import reduce_options
    from lambdaplay.services.filtering import FilterDemo
    from lambdaplay.services.flatmap import FlatMapDemo
    from lambdaplay.services.mapping import TransformDemo
    from lambdaplay.services.reduction import ReduceDemo

    return [
        FilterDemo(app.records).run(),
        TransformDemo(app.records).run(),
        ReduceDemo(app.records).run(**reduce_options(app)),
        FlatMapDemo(app.records).run(),
    ]


@click.command(
    "run",
    cls=DemoCommand,
    examples="""\
  lambdaplay run
  lambdaplay --json run
  LAMBDAPLAY_REDUCE__PARTITIONS=2 lambdaplay run""",
)
@click.pass_obj
def run(app: AppContext) -> None:
    """Run all four demos (the default when no command is given)."""
    app.emit_all(run_demos(app))
