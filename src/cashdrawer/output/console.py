"""Rich console used by the renderers.

Renderers print into an in-memory console and hand back the text, so
the CLI decides where it goes (stdout or stderr). Rich leaves out color
codes when the real stream is not a terminal, as under CliRunner.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 100

DRAWER_THEME = Theme(
    {
        "drawer.ok": "bold green",
        "drawer.error": "bold red",
        "drawer.warning": "bold yellow",
        "drawer.op": "bold cyan",
        "drawer.key": "bold blue",
        "drawer.amount": "bright_white",
        "drawer.short": "red",
        "drawer.count": "grey50",
        "drawer.label": "bold",
        "drawer.empty": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """A themed console writing to a fresh buffer, *width* columns wide."""
    return Console(
        file=StringIO(),
        theme=DRAWER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Everything printed to a console from :func:`create_console`."""
    buffer = console.file
    assert isinstance(buffer, StringIO)
    return buffer.getvalue()
