"""Command: the reduce demo, with optional partitioned evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from lambdaplay.commands._base import DemoCommand

if TYPE_CHECKING:
    from lambdaplay.commands._context import AppContext


def reduce_options(
    app: AppContext, partitions: int | None = None, parallel: bool | None = None
) -> dict[str, Any]:
    """Merge command-line overrides onto the ``[reduce]`` settings."""
    cfg = app.settings.reduce
    return {
        "partitions": cfg.partitions if partitions is None else partitions,
        "parallel": cfg.parallel if parallel is None else parallel,
        "max_workers": cfg.max_workers,
    }


@click.command(
    "reduce",
    cls=DemoCommand,
    examples="""\
  lambdaplay reduce
  lambdaplay reduce --partitions 2
  lambdaplay reduce --partitions 4 --parallel""",
)
@click.option(
    "--partitions",
    type=int,
    default=None,
    help="Split the input into this many chunks (1 = sequential fold).",
)
@click.option(
    "--parallel/--serial",
    default=None,
    help="Fold partitions on a thread pool.",
)
@click.pass_obj
def reduce_cmd(app: AppContext, partitions: int | None, parallel: bool | None) -> None:
    """Reduce the records and the characters A, B, C to integers."""
    from lambdaplay.services.reduction import ReduceDemo

    app.emit(ReduceDemo(app.records).run(**reduce_options(app, partitions, parallel)))
