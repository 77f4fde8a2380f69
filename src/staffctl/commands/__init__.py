"""Subcommand modules for staffctl.

Provides register_commands() which uses deferred imports to keep
``staffctl --help`` fast as the codebase grows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    2 groups (have subcommands) + 2 standalone commands.
    """
    # --- Groups ---
    from staffctl.commands.department import department
    from staffctl.commands.staff import staff

    cli.add_command(department)
    cli.add_command(staff)

    # --- Standalone commands ---
    from staffctl.commands.run import run
    from staffctl.commands.serve import serve

    cli.add_command(run)
    cli.add_command(serve)
