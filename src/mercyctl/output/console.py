"""Rich Console factory and theme for mercyctl output.

Consoles render into a StringIO buffer so formatters keep returning
``str``. Rich disables color codes on its own outside a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MERCY_THEME = Theme(
    {
        "mercy.ok": "bold green",
        "mercy.error": "bold red",
        "mercy.warning": "bold yellow",
        "mercy.op": "bold cyan",
        "mercy.key": "dim",
        "mercy.protocol": "bold blue",
        "mercy.domain": "bold",
        "mercy.extension": "magenta",
        "mercy.offset": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps hex rows on one line).
    """
    return Console(
        file=StringIO(),
        theme=MERCY_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
