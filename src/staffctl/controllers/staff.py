"""Staff commands: list, search, add, remove."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from staffctl.controllers import rules
from staffctl.controllers.views import show_staffs, staff_summary
from staffctl.domain.company import Company
from staffctl.domain.models import Staff
from staffctl.interaction.command import Command, CommandMode, SingleStepCommand
from staffctl.interaction.wizard import ConfirmBox

if TYPE_CHECKING:
    from collections.abc import Sequence

    from staffctl.interaction.wizard import Step

logger = logging.getLogger(__name__)


class ShowStaffsCommand(SingleStepCommand[Company]):
    title = "Staff"

    def run_feature(self, model: Company) -> bool:
        show_staffs(self.ui, model.staffs)
        return True


class SearchStaffsCommand(Command[Company]):
    """Search by name, number, department name, or department code."""

    title = "Search staff"
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
        show_staffs(self.ui, model.get_staffs(self.search_text))
        return True


class AddStaffCommand(Command[Company]):
    """Wizard: number → name → reading → department code → confirm."""

    title = "Add staff"
    mode = CommandMode.REPEAT

    number = 0
    name = ""
    ruby = ""
    department_code = 0

    def steps(self) -> Sequence[Step[Company]]:
        return (
            self.set_number,
            self.set_name,
            self.set_ruby,
            self.set_department_code,
            self.confirm,
        )

    def set_number(self, model: Company) -> bool:
        result = self.ui.get_int(
            f"Enter the {rules.STAFF_NUMBER}",
            [rules.staff_number_in_range(), rules.staff_number_unused(model)],
        )
        if not result.available:
            return False
        self.number = result.value
        return True

    def set_name(self, model: Company) -> bool:
        result = self.ui.get_str(
            f"Enter the {rules.STAFF_NAME}",
            [rules.name_length(rules.STAFF_NAME)],
        )
        if not result.available:
            return False
        self.name = result.value
        return True

    def set_ruby(self, model: Company) -> bool:
        result = self.ui.get_str(
            f"Enter the {rules.STAFF_RUBY}",
            [rules.name_length(rules.STAFF_RUBY)],
        )
        if not result.available:
            return False
        self.ruby = result.value
        return True

    def set_department_code(self, model: Company) -> bool:
        result = self.ui.get_int(
            f"Enter the {rules.DEPARTMENT_CODE}",
            [rules.department_code_exists(model)],
        )
        if not result.available:
            return False
        self.department_code = result.value
        return True

    def confirm(self, model: Company) -> bool:
        department = model.find_department(self.department_code)
        if department is None:
            return False
        staff = Staff(number=self.number, name=self.name, ruby=self.ruby, department=department)
        box = ConfirmBox(self.ui, self.title)
        if not box.show(staff_summary(staff), "Add this staff member?"):
            return False
        model.add_staff(staff)
        logger.info("Added staff %d to department %d", staff.number, department.code)
        return True


class RemoveStaffCommand(Command[Company]):
    """Wizard: number (existing) → confirm."""

    title = "Remove staff"
    mode = CommandMode.REPEAT

    number = 0

    def steps(self) -> Sequence[Step[Company]]:
        return (self.set_number, self.confirm)

    def set_number(self, model: Company) -> bool:
        result = self.ui.get_int(
            f"Enter the {rules.STAFF_NUMBER}",
            [rules.staff_number_exists(model)],
        )
        if not result.available:
            return False
        self.number = result.value
        return True

    def confirm(self, model: Company) -> bool:
        staff = model.find_staff(self.number)
        if staff is None:
            return False
        box = ConfirmBox(self.ui, self.title)
        if not box.show(staff_summary(staff), "Remove this staff member?"):
            return False
        model.remove_staff(self.number)
        logger.info("Removed staff %d", self.number)
        return True
