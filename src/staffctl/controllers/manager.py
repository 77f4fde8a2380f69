"""Main menu and the command dispatch loop."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from staffctl.controllers.department import (
    AddDepartmentCommand,
    RemoveDepartmentCommand,
    SearchDepartmentsCommand,
    ShowDepartmentsCommand,
)
from staffctl.controllers.staff import (
    AddStaffCommand,
    RemoveStaffCommand,
    SearchStaffsCommand,
    ShowStaffsCommand,
)
from staffctl.domain.company import Company
from staffctl.interaction.command import Command, CommandMode, SingleStepCommand
from staffctl.interaction.menu import Menu
from staffctl.interaction.wizard import ConfirmBox

if TYPE_CHECKING:
    from staffctl.interaction.prompt import Prompter

logger = logging.getLogger(__name__)

SELECT_MESSAGE = "Select an operation"
RETURN_MESSAGE = "Return to the main menu?"


class ExitCommand(SingleStepCommand[Company]):
    title = "Exit"
    mode = CommandMode.EXIT

    def run_feature(self, model: Company) -> bool:
        return False


def build_menu(ui: Prompter, *, title_width: int = 80) -> Menu[Company]:
    """The main menu, in display order."""
    entries: list[tuple[str, Command[Company]]] = [
        ("s", ShowStaffsCommand(ui, title_width=title_width)),
        ("f", SearchStaffsCommand(ui, title_width=title_width)),
        ("a", AddStaffCommand(ui, title_width=title_width)),
        ("r", RemoveStaffCommand(ui, title_width=title_width)),
        ("d", ShowDepartmentsCommand(ui, title_width=title_width)),
        ("g", SearchDepartmentsCommand(ui, title_width=title_width)),
        ("e", AddDepartmentCommand(ui, title_width=title_width)),
        ("k", RemoveDepartmentCommand(ui, title_width=title_width)),
        ("x", ExitCommand(ui, title_width=title_width)),
    ]
    return Menu(ui, entries)


class CommandManager:
    """Selects one command per call and runs it with the repeat protocol.

    ``REPEAT`` commands run again after each successful pass unless the
    operator confirms a return to the main menu. ``EXIT`` stops the
    program whatever its steps return.
    """

    def __init__(self, ui: Prompter, menu: Menu[Company]) -> None:
        self.ui = ui
        self.menu = menu

    def run(self, model: Company) -> bool:
        """Run one menu round. Returns False when the program should stop."""
        command = self.menu.select(SELECT_MESSAGE)
        if command is None:
            logger.debug("Main menu cancelled")
            return False
        while command.run(model) and command.mode == CommandMode.REPEAT:
            if ConfirmBox(self.ui, command.title).show("", RETURN_MESSAGE):
                break
        return command.mode != CommandMode.EXIT
