"""Command group: department list/search/add/remove."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from staffctl.commands._base import StaffGroup

if TYPE_CHECKING:
    from staffctl.commands._context import AppContext


@click.group(
    cls=StaffGroup,
    examples="""\
  staffctl department list
  staffctl department search Dev
  staffctl department add 181 "Cloud Development"
  staffctl --json department remove 181""",
)
def department() -> None:
    """List, search, add, and remove departments."""


@department.command(
    "list",
    examples="""\
  staffctl department list
  staffctl --json department list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every department, ordered by code."""
    app.emit(app.service.list_departments())


@department.command(
    examples="""\
  staffctl department search Dev
  staffctl department search 181""",
)
@click.argument("search_text")
@click.pass_obj
def search(app: AppContext, search_text: str) -> None:
    """Find departments by name substring or exact code."""
    app.emit(app.service.search_departments(search_text))


@department.command(
    examples="""\
  staffctl department add 181 "Cloud Development"
  staffctl --json department add 942 HR""",
)
@click.argument("code", type=int)
@click.argument("name")
@click.pass_obj
def add(app: AppContext, code: int, name: str) -> None:
    """Add a department (code 100-999, name 1-30 characters)."""
    app.emit(app.service.add_department(code, name))


@department.command(
    examples="""\
  staffctl department remove 181""",
)
@click.argument("code", type=int)
@click.pass_obj
def remove(app: AppContext, code: int) -> None:
    """Remove a department that has no staff assigned."""
    app.emit(app.service.remove_department(code))
