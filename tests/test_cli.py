"""Tests for the root lambdaplay CLI."""

from __future__ import annotations

import json

from click.testing import CliRunner

from lambdaplay import __version__
from lambdaplay.cli import cli

RECORDS = "[Val{v1=1, v2=1}, Val{v1=1, v2=2}, Val{v1=2, v2=1}, Val{v1=2, v2=2}]"

EXPECTED_LINES = [
    f"Before own Predicate call: {RECORDS}",
    "Own Predicate call Result: [Val{v1=1, v2=1}, Val{v1=1, v2=2}]",
    f"Before own function call: {RECORDS}",
    "Function call Result: [2, 3, 3, 4]",
    "Reduce result: 6",
    "Reduce ascii result: 198",
    f"Before own FlatMap call: {RECORDS}",
    "FlatMap call Result: [1, 1, 2, 2] resultFlatMap: [1, 1, 2, 2]",
]


def test_no_args_runs_every_demo_in_order(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == EXPECTED_LINES


def test_run_command_matches_default(cli_runner: CliRunner) -> None:
    default = cli_runner.invoke(cli, [])
    explicit = cli_runner.invoke(cli, ["run"])
    assert explicit.exit_code == 0
    assert explicit.stdout == default.stdout


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "lambdaplay" in result.output
    for name in ("run", "filter", "map", "reduce", "flatmap"):
        assert name in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_root_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "Examples for 'cli'" in result.output or "Examples for" in result.output
    assert "reduce --partitions 2" in result.output


def test_json_run_is_array_of_results(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [item["op"] for item in payload] == ["filter", "map", "reduce", "flatmap"]
    assert all(item["ok"] for item in payload)
    assert payload[2]["data"]["result"] == 6
    assert payload[2]["data"]["ascii_result"] == 198


def test_quiet_prints_result_lines_only(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-q"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        line for line in EXPECTED_LINES if not line.startswith("Before")
    ]


def test_verbose_adds_telemetry(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "map"])
    assert result.exit_code == 0
    assert "Function call Result: [2, 3, 3, 4]" in result.stdout
    assert "telemetry:" in result.stdout
    assert "TransformDemo.run" in result.stdout


def test_env_partitions_apply_to_run(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["run"], env={"LAMBDAPLAY_REDUCE__PARTITIONS": "2"})
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines.index("a: 2 b: 4 c: 6") == lines.index("Reduce result: 6") - 1
