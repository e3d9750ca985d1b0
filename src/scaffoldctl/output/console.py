"""Console construction for rendered output.

Renderers never print to the terminal directly. They draw on a Console
whose file is a StringIO, so every output mode ends up as a plain string
that the command layer echoes. Colors are dropped automatically when the
real stdout is not a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SCAFFOLD_THEME = Theme(
    {
        "sc.ok": "bold green",
        "sc.error": "bold red",
        "sc.warning": "bold yellow",
        "sc.op": "bold cyan",
        "sc.key": "dim",
        "sc.name": "bold blue",
        "sc.path": "dim",
        "sc.label": "bold",
        "sc.category": "magenta",
        "sc.default": "green",
    }
)

DEFAULT_WIDTH = 120


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """A themed Console drawing into a fresh buffer."""
    return Console(
        file=StringIO(),
        theme=SCAFFOLD_THEME,
        width=width or DEFAULT_WIDTH,
        no_color=no_color,
        highlight=False,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        raise TypeError("console was not created by create_console()")
    return buffer.getvalue()
