"""Command: interactive menu session."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from staffctl.commands._base import StaffCommand

if TYPE_CHECKING:
    from staffctl.commands._context import AppContext


@click.command(
    cls=StaffCommand,
    examples="""\
  staffctl run
  staffctl --data-file ~/company.json run
  staffctl -v --log-json run 2> session.log""",
)
@click.pass_obj
def run(app: AppContext) -> None:
    """Start the interactive menu (type the cancel token, default '/', to go back)."""
    from staffctl.controllers.session import InteractiveSession

    session = InteractiveSession(
        app.prompter(),
        app.settings.data_path,
        title_width=app.settings.console.title_width,
    )
    code = session.run()
    if code:
        raise SystemExit(code)
