"""Table views of departments and staff for the interactive session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from staffctl.output.renderers import render_departments, render_staffs
from staffctl.services.contracts import department_item, staff_item

if TYPE_CHECKING:
    from collections.abc import Iterable

    from staffctl.domain.models import Department, Staff
    from staffctl.interaction.prompt import Prompter


def show_departments(ui: Prompter, departments: Iterable[Department]) -> None:
    ui.show(render_departments([department_item(d) for d in departments]))


def show_staffs(ui: Prompter, staffs: Iterable[Staff]) -> None:
    ui.show(render_staffs([staff_item(s) for s in staffs]))


def department_summary(department: Department) -> str:
    return f"Code\t: {department.code}\nName\t: {department.name}"


def staff_summary(staff: Staff) -> str:
    return (
        f"Number\t: {staff.number}\n"
        f"Name\t: {staff.name}({staff.ruby})\n"
        f"Dept\t: {staff.department.name}({staff.department.code})"
    )
