"""Line-oriented console boundary used by prompts, wizards, and menus.

The interaction layer only needs three things from a console: read one
line, write text, and write a line. :class:`LineIO` names that contract;
:class:`TerminalIO` implements it on stdin/stdout with Rich styling.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Protocol

import click
from rich.cells import cell_len
from rich.console import Console

from staffctl.output.console import STAFF_THEME

if TYPE_CHECKING:
    from typing import TextIO


class LineIO(Protocol):
    """Minimal console contract.

    ``read_line`` returns None at end of input. ``style`` is the Rich
    style applied to subsequent writes (None for the default).
    """

    style: str | None

    def read_line(self) -> str | None: ...

    def write(self, text: str) -> None: ...

    def write_line(self, text: str = "") -> None: ...


class TerminalIO:
    """:class:`LineIO` over the process's standard streams."""

    def __init__(
        self,
        *,
        no_color: bool = False,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.style: str | None = None
        self._stdin = stdin or click.get_text_stream("stdin")
        self._console = Console(
            file=stdout or click.get_text_stream("stdout"),
            theme=STAFF_THEME,
            no_color=no_color,
            highlight=False,
            soft_wrap=True,
        )

    def read_line(self) -> str | None:
        line = self._stdin.readline()
        if not line:
            return None
        return line

    def write(self, text: str) -> None:
        self._console.print(text, style=self.style, markup=False, end="")

    def write_line(self, text: str = "") -> None:
        self._console.print(text, style=self.style, markup=False)


@contextmanager
def styled(io: LineIO, style: str | None) -> Iterator[LineIO]:
    """Apply *style* to *io* for the duration of the block.

    The previous style is restored on every exit path.
    """
    previous = io.style
    io.style = style
    try:
        yield io
    finally:
        io.style = previous


def normalize_line(line: str) -> str:
    """Strip surrounding whitespace and apply NFKC normalization."""
    return unicodedata.normalize("NFKC", line.strip())


def display_width(text: str) -> int:
    """Terminal column width of *text*, measured the way Rich lays out tables."""
    return cell_len(text)
