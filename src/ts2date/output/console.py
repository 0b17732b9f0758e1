"""Rich console setup for human-readable CLI output."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.theme import Theme

THEME = Theme(
    {
        "ts2date.ok": "bold green",
        "ts2date.error": "bold red",
        "ts2date.op": "bold cyan",
        "ts2date.key": "dim",
        "ts2date.converted": "bold green",
        "ts2date.unchanged": "dim",
    }
)

OUTPUT_WIDTH = 120


def capture_text(draw: Callable[[Console], None]) -> str:
    """Run *draw* against a themed console and return what it printed.

    Styles become ANSI codes only when stdout is a terminal, so piped
    output and tests see plain text.
    """
    console = Console(theme=THEME, highlight=False, width=OUTPUT_WIDTH)
    with console.capture() as captured:
        draw(console)
    return captured.get().rstrip("\n")
