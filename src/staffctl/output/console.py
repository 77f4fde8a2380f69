"""Rich Console factory and theme for staffctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``render_* -> str`` contract.  In non-TTY environments (tests,
pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

STAFF_THEME = Theme(
    {
        "staff.ok": "bold green",
        "staff.error": "bold red",
        "staff.warning": "bold yellow",
        "staff.op": "bold cyan",
        "staff.key": "dim",
        "staff.code": "bold blue",
        "staff.number": "bold magenta",
        "staff.title": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=STAFF_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
