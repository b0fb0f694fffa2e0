"""Rich Console factory and theme for deobf output.

Consoles render into a StringIO buffer so formatters can return strings.
In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEOBF_THEME = Theme(
    {
        "deobf.ok": "bold green",
        "deobf.error": "bold red",
        "deobf.warning": "bold yellow",
        "deobf.op": "bold cyan",
        "deobf.key": "dim",
        "deobf.type": "bold blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=DEOBF_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
