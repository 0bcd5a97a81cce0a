"""Turn Rich markup into the plain text that ``format_result`` returns.

The Console writes to a buffer, never to the terminal. Rich leaves colour
codes out because the buffer is not a TTY.
"""

from __future__ import annotations

from collections.abc import Iterable
from io import StringIO

from rich.console import Console
from rich.theme import Theme

OUTCOME_THEME = Theme(
    {
        "outcome.ok": "bold green",
        "outcome.error": "bold red",
        "outcome.op": "bold cyan",
        "outcome.key": "dim",
    }
)


def render(lines: Iterable[str], *, width: int = 120) -> str:
    """Render markup *lines*, one per output line, without a trailing newline."""
    buffer = StringIO()
    console = Console(file=buffer, theme=OUTCOME_THEME, highlight=False, width=width)
    for line in lines:
        # Paths must stay on one line for copy-paste.
        console.print(line, soft_wrap=True)
    return buffer.getvalue().rstrip("\n")
