"""Department commands: list, search, add, remove."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from staffctl.controllers import rules
from staffctl.controllers.views import department_summary, show_departments
from staffctl.domain.company import Company
from staffctl.domain.models import Department
from staffctl.interaction.command import Command, CommandMode, SingleStepCommand
from staffctl.interaction.wizard import ConfirmBox

if TYPE_CHECKING:
    from collections.abc import Sequence

    from staffctl.interaction.wizard import Step

logger = logging.getLogger(__name__)


class ShowDepartmentsCommand(SingleStepCommand[Company]):
    title = "Departments"

    def run_feature(self, model: Company) -> bool:
        show_departments(self.ui, model.departments)
        return True


class SearchDepartmentsCommand(Command[Company]):
    title = "Search departments"
    mode = CommandMode.REPEAT

    search_text = ""

    def steps(self) -> Sequence[Step[Company]]:
        return (self.set_search_text, self.show_matches)

    def set_search_text(self, model: Company) -> bool:
        result = self.ui.get_str("Enter a search text")
        if not result.available:
            return False
        self.search_text = result.value or ""
        return True

    def show_matches(self, model: Company) -> bool:
        show_departments(self.ui, model.get_departments(self.search_text))
        return True


class AddDepartmentCommand(Command[Company]):
    """Wizard: code → name → confirm."""

    title = "Add department"
    mode = CommandMode.REPEAT

    code = 0
    name = ""

    def steps(self) -> Sequence[Step[Company]]:
        return (self.set_code, self.set_name, self.confirm)

    def set_code(self, model: Company) -> bool:
        result = self.ui.get_int(
            f"Enter the {rules.DEPARTMENT_CODE}",
            [rules.department_code_in_range(), rules.department_code_unused(model)],
        )
        if not result.available:
            return False
        self.code = result.value
        return True

    def set_name(self, model: Company) -> bool:
        result = self.ui.get_str(
            f"Enter the {rules.DEPARTMENT_NAME}",
            [rules.name_length(rules.DEPARTMENT_NAME)],
        )
        if not result.available:
            return False
        self.name = result.value
        return True

    def confirm(self, model: Company) -> bool:
        department = Department(code=self.code, name=self.name)
        box = ConfirmBox(self.ui, self.title)
        if not box.show(department_summary(department), "Add this department?"):
            return False
        model.add_department(department)
        logger.info("Added department %d", department.code)
        return True


class RemoveDepartmentCommand(Command[Company]):
    """Wizard: code (existing, unused) → confirm."""

    title = "Remove department"
    mode = CommandMode.REPEAT

    code = 0

    def steps(self) -> Sequence[Step[Company]]:
        return (self.set_code, self.confirm)

    def set_code(self, model: Company) -> bool:
        result = self.ui.get_int(
            f"Enter the {rules.DEPARTMENT_CODE}",
            [rules.department_code_exists(model), rules.department_not_in_use(model)],
        )
        if not result.available:
            return False
        self.code = result.value
        return True

    def confirm(self, model: Company) -> bool:
        department = model.find_department(self.code)
        if department is None:
            return False
        box = ConfirmBox(self.ui, self.title)
        if not box.show(department_summary(department), "Remove this department?"):
            return False
        if not model.remove_department(self.code):
            self.ui.show_error("That department still has staff assigned")
            return False
        logger.info("Removed department %d", self.code)
        return True
