"""Rule-validated input acquisition.

:meth:`Prompter.get` turns one line of text into a typed value in two
independent gates:

1. **Parse** — a parser function raising ``ValueError`` on bad text.
   Parse failures re-prompt silently.
2. **Rules** — ordered ``(check, message)`` pairs. The first failing rule's
   message is shown and the same prompt repeats.

The reserved cancel token (default ``/``) returns
``Acquired(available=False)`` at any point. End of input counts as cancel.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from staffctl.interaction.console import LineIO, normalize_line, styled

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CANCEL_TOKEN = "/"
DEFAULT_ERROR_HEADER = "[error]"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Parsers: the closed set of supported value types
# ---------------------------------------------------------------------------


def parse_int(text: str) -> int:
    """Parse a signed decimal integer (``42``, ``-7``, ``+3``)."""
    if not _INT_PATTERN.fullmatch(text):
        msg = f"Not an integer: {text!r}"
        raise ValueError(msg)
    return int(text)


def parse_str(text: str) -> str:
    """Accept any text as-is."""
    return text


# ---------------------------------------------------------------------------
# Rules and results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Rule(Generic[T]):
    """A predicate over a parsed value and the message shown when it fails."""

    check: Callable[[T], bool]
    message: str


@dataclass(frozen=True)
class Acquired(Generic[T]):
    """Outcome of an acquisition. ``available`` is False exactly on cancel."""

    available: bool
    value: T | None = None


def first_violation(value: T, rules: Sequence[Rule[T]]) -> Rule[T] | None:
    """Return the first rule *value* fails, in declaration order."""
    return next((rule for rule in rules if not rule.check(value)), None)


# ---------------------------------------------------------------------------
# Prompter
# ---------------------------------------------------------------------------


class Prompter:
    """Prompt/response helper bound to a :class:`LineIO`.

    Attributes:
        io: The console to read from and write to.
        cancel_token: Literal line that abandons the current acquisition.
        error_header: Prefix for rule-failure messages.
    """

    def __init__(
        self,
        io: LineIO,
        *,
        cancel_token: str = DEFAULT_CANCEL_TOKEN,
        error_header: str = DEFAULT_ERROR_HEADER,
        separator: str = "-",
    ) -> None:
        self.io = io
        self.cancel_token = cancel_token
        self.error_header = error_header
        self.separator_char = separator

    # --- Acquisition ---

    def get(
        self,
        message: str,
        parser: Callable[[str], T],
        rules: Sequence[Rule[T]] = (),
    ) -> Acquired[T]:
        """Prompt until a line parses and satisfies every rule, or is cancelled."""
        while True:
            line = self._prompt_line(message)
            if line is None:
                return Acquired(available=False)
            try:
                value = parser(line)
            except ValueError:
                logger.debug("Parse failed for %r, re-prompting", line)
                continue
            violation = first_violation(value, rules)
            if violation is None:
                return Acquired(available=True, value=value)
            self.show_error(violation.message)

    def get_int(self, message: str, rules: Sequence[Rule[int]] = ()) -> Acquired[int]:
        return self.get(message, parse_int, rules)

    def get_str(self, message: str, rules: Sequence[Rule[str]] = ()) -> Acquired[str]:
        return self.get(message, parse_str, rules)

    def get_mnemonic(self, message: str, mnemonics: str) -> Acquired[str]:
        """Prompt for one of the single characters in *mnemonics*.

        The first character of the line is case-folded before matching.
        Blank lines and unknown characters re-prompt.
        """
        while True:
            line = self._prompt_line(message)
            if line is None:
                return Acquired(available=False)
            if not line:
                continue
            mnemonic = line[0].casefold()
            if mnemonic in mnemonics:
                return Acquired(available=True, value=mnemonic)

    # --- Output ---

    def show(self, text: str = "") -> None:
        self.io.write_line(text)

    def show_error(self, message: str) -> None:
        with styled(self.io, "staff.error"):
            self.io.write_line(f"{self.error_header} {message}")

    def separator(self, length: int) -> str:
        return self.separator_char * length

    def show_separator(self, length: int) -> None:
        self.show(self.separator(length))

    # --- Internals ---

    def _prompt_line(self, message: str) -> str | None:
        """Show ``message:`` and read a normalized line; None on cancel or EOF."""
        self.io.write(f"{message}:")
        raw = self.io.read_line()
        if raw is None:
            logger.debug("End of input treated as cancel")
            return None
        line = normalize_line(raw)
        if line == self.cancel_token:
            return None
        return line
