"""Mnemonic-keyed menu over an ordered command table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from staffctl.interaction.console import display_width

if TYPE_CHECKING:
    from collections.abc import Sequence

    from staffctl.interaction.command import Command
    from staffctl.interaction.prompt import Prompter

logger = logging.getLogger(__name__)

M = TypeVar("M")


class Menu(Generic[M]):
    """Ordered ``(mnemonic, command)`` table.

    Items display in registration order. Mnemonics are single characters,
    matched case-insensitively, and must be pairwise distinct.

    Raises:
        ValueError: At construction, for an empty table, a mnemonic that is
            not a single character, or a duplicate mnemonic.
    """

    def __init__(self, ui: Prompter, entries: Sequence[tuple[str, Command[M]]]) -> None:
        if not entries:
            msg = "Menu needs at least one command"
            raise ValueError(msg)
        seen: set[str] = set()
        table: list[tuple[str, Command[M]]] = []
        for mnemonic, command in entries:
            if len(mnemonic) != 1:
                msg = f"Mnemonic must be a single character: {mnemonic!r}"
                raise ValueError(msg)
            key = mnemonic.casefold()
            if key in seen:
                msg = f"Duplicate mnemonic {mnemonic!r} for {command.title!r}"
                raise ValueError(msg)
            seen.add(key)
            table.append((key, command))
        self.ui = ui
        self._entries = tuple(table)

    @property
    def mnemonics(self) -> str:
        return "".join(key for key, _ in self._entries)

    @property
    def commands(self) -> tuple[Command[M], ...]:
        return tuple(command for _, command in self._entries)

    def items_line(self) -> str:
        """Menu items as ``(s)Title, (a)Title`` in registration order."""
        return ", ".join(f"({key}){command.title}" for key, command in self._entries)

    def select(self, message: str) -> Command[M] | None:
        """Prompt for a mnemonic and return its command, or None if cancelled."""
        items = self.items_line()
        separator = self.ui.separator(display_width(items))
        answer = self.ui.get_mnemonic(f"{separator}\n{items}\n{separator}\n{message}", self.mnemonics)
        if not answer.available:
            return None
        command = dict(self._entries)[answer.value]  # type: ignore[index]
        logger.debug("Selected %r", command.title)
        return command
