"""Rich console and theme for cyclectl output.

Renderers draw into an in-memory console and hand back the text, so
``format_result()`` stays a plain ``-> str`` function. Rich drops colour
codes on its own when stdout is not a terminal (pipes, CliRunner).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CYCLE_THEME = Theme(
    {
        "cyc.ok": "bold green",
        "cyc.error": "bold red",
        "cyc.op": "bold cyan",
        "cyc.key": "dim",
        "cyc.id": "bold blue",
        "cyc.name": "bold",
        "cyc.true": "bold yellow",
        "cyc.false": "green",
    }
)

_WIDTH = 120


def create_console() -> Console:
    """A fixed-width console writing into a fresh buffer."""
    return Console(file=StringIO(), theme=CYCLE_THEME, highlight=False, width=_WIDTH)


def get_output(console: Console) -> str:
    """Text rendered so far by a console from :func:`create_console`."""
    buffer = console.file
    assert isinstance(buffer, StringIO)
    return buffer.getvalue()
