"""Interactive session — load, run the menu loop, save."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from staffctl.controllers.manager import CommandManager, build_menu
from staffctl.domain.errors import SerializeError
from staffctl.infrastructure.storage import load_company, save_company

if TYPE_CHECKING:
    from pathlib import Path

    from staffctl.interaction.prompt import Prompter

logger = logging.getLogger(__name__)

APPLICATION_NAME = "staffctl"


class InteractiveSession:
    """One run of the menu-driven program against a data file.

    The file is read once before the first menu and written once after
    the operator exits. Serialization failures are reported on the
    console and turned into a non-zero exit status.
    """

    def __init__(self, ui: Prompter, data_path: Path, *, title_width: int = 80) -> None:
        self.ui = ui
        self.data_path = data_path
        self.manager = CommandManager(ui, build_menu(ui, title_width=title_width))

    def run(self) -> int:
        """Run the session and return a process exit code."""
        try:
            company = load_company(self.data_path)
        except SerializeError as exc:
            self.ui.show_error(f"Cannot load {self.data_path}: {exc}")
            return 1

        self.ui.show(f"<<{APPLICATION_NAME}>>")
        while self.manager.run(company):
            pass

        try:
            save_company(company, self.data_path)
        except SerializeError as exc:
            self.ui.show_error(f"Cannot save {self.data_path}: {exc}")
            return 1
        logger.info("Session saved to %s", self.data_path)
        return 0
