"""Step-sequenced wizards and confirmation boxes.

A wizard is a fixed list of steps, each ``(model) -> bool``. The
sequencer is a linear state machine with ``len(steps) + 1`` reachable
states counting the two absorbing outcomes:

- step succeeds → advance; past the last step → overall success
- step fails    → back up one; before the first step → overall failure

Backing up re-runs the earlier step's acquisition logic rather than
restoring a previous value.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Generic, TypeVar

from staffctl.interaction.console import display_width

if TYPE_CHECKING:
    from staffctl.interaction.prompt import Prompter

logger = logging.getLogger(__name__)

M = TypeVar("M")

Step = Callable[[M], bool]

YES = "y"
NO = "n"


def run_steps(steps: Sequence[Step[M]], model: M) -> bool:
    """Drive *steps* against *model* and return the overall outcome.

    An empty step list is an immediate success.
    """
    index = 0
    while 0 <= index < len(steps):
        if steps[index](model):
            logger.debug("Step %d succeeded", index)
            index += 1
        else:
            logger.debug("Step %d failed, backing up", index)
            index -= 1
    return index >= len(steps)


class Window:
    """Base for titled console boxes."""

    def __init__(self, ui: Prompter, title: str) -> None:
        self.ui = ui
        self.title = title

    def show_title_bar(self, separator_length: int) -> None:
        self.ui.show()
        self.ui.show_separator(separator_length)
        self.ui.show(f"【{self.title}】")
        self.ui.show_separator(separator_length)


class Wizard(Window, Generic[M]):
    """Titled step sequence. The banner is shown once, not per step."""

    def __init__(
        self,
        ui: Prompter,
        title: str,
        steps: Sequence[Step[M]],
        *,
        title_width: int = 80,
    ) -> None:
        super().__init__(ui, title)
        self.steps = tuple(steps)
        self.title_width = title_width

    def run(self, model: M) -> bool:
        self.show_title_bar(self.title_width)
        outcome = run_steps(self.steps, model)
        logger.debug("Wizard %r finished: %s", self.title, "ok" if outcome else "abandoned")
        return outcome


class ConfirmBox(Window):
    """Yes/no confirmation framed to the width of its content."""

    margin_width = 8

    def show(self, text: str, message: str) -> bool:
        """Show *text*, ask *message*, and return True only on ``y``.

        ``n`` and cancel both count as a decline.
        """
        question = f"{message} ({YES}/{NO})"
        width = (
            max(display_width(line) for line in [*text.split("\n"), self.title, question])
            + self.margin_width
        )
        self.show_title_bar(width)
        if text:
            self.ui.show(text)
            self.ui.show_separator(width)
        answer = self.ui.get_mnemonic(question, YES + NO)
        return answer.available and answer.value == YES
