"""Root CLI group for lambdaplay with global flags and command registration."""

from __future__ import annotations

import click

from lambdaplay import __version__
from lambdaplay.commands import register_commands
from lambdaplay.commands._base import DemoGroup
from lambdaplay.commands._context import AppContext
from lambdaplay.config.settings import LambdaplaySettings


@click.group(
    cls=DemoGroup,
    invoke_without_command=True,
    examples="""\
  lambdaplay
  lambdaplay --json
  lambdaplay -v reduce --partitions 2
  lambdaplay -c ./lambdaplay.toml run""",
)
@click.version_option(version=__version__, prog_name="lambdaplay")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print result lines only.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and telemetry spans.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """lambdaplay: filter, map, reduce, and flat-map, step by step.

    With no command, runs every demo in order.
    """
    settings = LambdaplaySettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from lambdaplay.commands.run import run

        ctx.invoke(run)


register_commands(cli)
