"""Subcommand modules for lambdaplay.

Provides register_commands() which uses deferred imports to keep
``lambdaplay --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``run`` command and one command per demo."""
    from lambdaplay.commands.filter_cmd import filter_cmd
    from lambdaplay.commands.flatmap_cmd import flatmap_cmd
    from lambdaplay.commands.map_cmd import map_cmd
    from lambdaplay.commands.reduce_cmd import reduce_cmd
    from lambdaplay.commands.run import run

    cli.add_command(run)
    cli.add_command(filter_cmd)
    cli.add_command(map_cmd)
    cli.add_command(reduce_cmd)
    cli.add_command(flatmap_cmd)
