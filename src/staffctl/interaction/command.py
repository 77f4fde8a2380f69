"""Commands — titled, mode-tagged units of wizard work."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Generic, TypeVar

from staffctl.interaction.wizard import Wizard

if TYPE_CHECKING:
    from collections.abc import Sequence

    from staffctl.interaction.prompt import Prompter
    from staffctl.interaction.wizard import Step

M = TypeVar("M")


class CommandMode(StrEnum):
    """How the menu driver treats a command after it runs."""

    ONCE = "once"
    REPEAT = "repeat"
    EXIT = "exit"


class Command(Generic[M]):
    """Base class for menu commands.

    Subclasses set :attr:`title` and :attr:`mode` and override
    :meth:`steps`. ``run`` hands the steps to a :class:`Wizard`; the
    driver, not the step result, decides what ``EXIT`` means.
    """

    title: str = ""
    mode: CommandMode = CommandMode.ONCE

    def __init__(self, ui: Prompter, *, title_width: int = 80) -> None:
        self.ui = ui
        self.title_width = title_width

    def steps(self) -> Sequence[Step[M]]:
        return ()

    def run(self, model: M) -> bool:
        wizard = Wizard(self.ui, self.title, self.steps(), title_width=self.title_width)
        return wizard.run(model)


class SingleStepCommand(Command[M]):
    """Command whose whole body is one side-effect-only action.

    Back-navigation is impossible: failing the one step cancels.
    """

    def steps(self) -> Sequence[Step[M]]:
        return (self.run_feature,)

    def run_feature(self, model: M) -> bool:
        raise NotImplementedError
