"""Command group: staff list/search/add/remove."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from staffctl.commands._base import StaffGroup

if TYPE_CHECKING:
    from staffctl.commands._context import AppContext


@click.group(
    cls=StaffGroup,
    examples="""\
  staffctl staff list
  staffctl staff search Taro
  staffctl staff add 826 Taro タロウ 181
  staffctl --json staff remove 826""",
)
def staff() -> None:
    """List, search, add, and remove staff members."""


@staff.command(
    "list",
    examples="""\
  staffctl staff list
  staffctl -q staff list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every staff member, ordered by department then number."""
    app.emit(app.service.list_staffs())


@staff.command(
    examples="""\
  staffctl staff search Taro
  staffctl staff search 826
  staffctl staff search 181""",
)
@click.argument("search_text")
@click.pass_obj
def search(app: AppContext, search_text: str) -> None:
    """Find staff by name, number, department name, or department code."""
    app.emit(app.service.search_staffs(search_text))


@staff.command(
    examples="""\
  staffctl staff add 826 Taro タロウ 181""",
)
@click.argument("number", type=int)
@click.argument("name")
@click.argument("ruby")
@click.argument("department_code", type=int)
@click.pass_obj
def add(app: AppContext, number: int, name: str, ruby: str, department_code: int) -> None:
    """Add a staff member to an existing department."""
    app.emit(app.service.add_staff(number, name, ruby, department_code))


@staff.command(
    examples="""\
  staffctl staff remove 826""",
)
@click.argument("number", type=int)
@click.pass_obj
def remove(app: AppContext, number: int) -> None:
    """Remove a staff member by number."""
    app.emit(app.service.remove_staff(number))
