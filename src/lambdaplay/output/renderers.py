"""Demo-specific Rich renderers for DemoResult.

Each demo result is first turned into a list of :class:`Line` objects by an
op-specific builder, then written to a Rich Console.  Builders are
dispatched by ``result.op``; unknown ops fall through to a generic
key-value builder.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from rich.text import Text

from lambdaplay.domain.records import Record, format_records
from lambdaplay.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from lambdaplay.services.result import DemoResult

LineKind = Literal["before", "trace", "result"]


@dataclass(frozen=True)
class Line:
    """One printed line: a label followed by a value."""

    kind: LineKind
    label: str
    value: str = ""

    @property
    def plain(self) -> str:
        return f"{self.label}{self.value}"


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: DemoResult, *, verbose: bool = False, width: int | None = None
) -> str:
    """Render a DemoResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)
    if result.ok:
        for line in result_lines(result):
            console.print(
                Text.assemble((line.label, f"lp.{line.kind}"), line.value), soft_wrap=True
            )
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(console, result)
    return get_output(console).rstrip("\n")


def render_quiet(result: DemoResult) -> str:
    """Render only the result lines, for ``--quiet`` mode."""
    if not result.ok:
        return _error_text(result)
    return "\n".join(line.plain for line in result_lines(result) if line.kind == "result")


def result_lines(result: DemoResult) -> list[Line]:
    """Build the printable lines for a successful result."""
    builder = _OP_BUILDERS.get(result.op, _generic_lines)
    return builder(result.data)


# ── Helpers ───────────────────────────────────────────────────────────


def _records(encoded: list[dict[str, Any]]) -> str:
    return format_records([Record.from_dict(item) for item in encoded])


def _error_text(result: DemoResult) -> str:
    msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} — {msg}"


def _render_error(console: Console, result: DemoResult) -> None:
    console.print(Text(_error_text(result), style="lp.error"), soft_wrap=True)


def _render_meta(console: Console, result: DemoResult) -> None:
    """Print the telemetry span tree, when there is one."""
    telemetry = (result.meta or {}).get("telemetry")
    if not telemetry:
        return
    console.print(Text("  telemetry:", style="dim"))
    _render_span(console, telemetry, indent=4)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    text = Text(" " * indent)
    text.append(span.get("name", "?"), style="lp.op")
    text.append(f" {span.get('duration_ms', 0.0):.2f}ms", style="lp.timing")
    for key, value in span.get("annotations", {}).items():
        text.append(f" {key}={value}", style="dim")
    console.print(text, soft_wrap=True)
    for child in span.get("children", []):
        _render_span(console, child, indent + 2)


# ── Op-specific line builders ─────────────────────────────────────────


def _filter_lines(data: dict[str, Any]) -> list[Line]:
    return [
        Line("before", "Before own Predicate call: ", _records(data["before"])),
        Line("result", "Own Predicate call Result: ", _records(data["result"])),
    ]


def _map_lines(data: dict[str, Any]) -> list[Line]:
    return [
        Line("before", "Before own function call: ", _records(data["before"])),
        Line("result", "Function call Result: ", str(data["result"])),
    ]


def _reduce_lines(data: dict[str, Any]) -> list[Line]:
    lines = [
        Line("trace", f"a: {call['a']} b: {call['b']} c: {call['c']}")
        for call in data.get("combiner_calls", [])
    ]
    lines.append(Line("result", "Reduce result: ", str(data["result"])))
    lines.append(Line("result", "Reduce ascii result: ", str(data["ascii_result"])))
    return lines


def _flatmap_lines(data: dict[str, Any]) -> list[Line]:
    return [
        Line("before", "Before own FlatMap call: ", _records(data["before"])),
        Line(
            "result",
            "FlatMap call Result: ",
            f"{data['projected']} resultFlatMap: {data['flattened']}",
        ),
    ]


def _generic_lines(data: dict[str, Any]) -> list[Line]:
    return [Line("result", f"{key}: ", str(value)) for key, value in data.items()]


_OP_BUILDERS: dict[str, Callable[[dict[str, Any]], list[Line]]] = {
    "filter": _filter_lines,
    "map": _map_lines,
    "reduce": _reduce_lines,
    "flatmap": _flatmap_lines,
}
