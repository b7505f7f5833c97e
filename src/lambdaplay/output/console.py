"""Rich Console factory and theme for lambdaplay output.

Consoles render into a StringIO buffer so renderers can return plain
strings.  In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LAMBDAPLAY_THEME = Theme(
    {
        "lp.before": "dim",
        "lp.result": "bold green",
        "lp.trace": "magenta",
        "lp.error": "bold red",
        "lp.op": "bold cyan",
        "lp.timing": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Terminal width; lines are never soft-wrapped regardless.
    """
    return Console(
        file=StringIO(),
        theme=LAMBDAPLAY_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
