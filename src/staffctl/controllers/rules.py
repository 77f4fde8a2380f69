"""Acquisition rules for department and staff wizards.

Each factory returns a :class:`Rule` whose message names the field the
operator is typing, so the same rule reads naturally in every wizard.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from staffctl.domain.models import (
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    Department,
    Staff,
    name_length_ok,
)
from staffctl.interaction.prompt import Rule

if TYPE_CHECKING:
    from staffctl.domain.company import Company

DEPARTMENT_CODE = "department code"
DEPARTMENT_NAME = "department name"
STAFF_NUMBER = "staff number"
STAFF_NAME = "staff name"
STAFF_RUBY = "staff name reading"


def name_length(label: str) -> Rule[str]:
    return Rule(
        name_length_ok,
        f"Enter the {label} in {NAME_MIN_LENGTH} to {NAME_MAX_LENGTH} characters",
    )


# --- Department code ---


def department_code_in_range() -> Rule[int]:
    return Rule(
        Department.code_in_range,
        f"Enter the {DEPARTMENT_CODE} between {Department.MIN_CODE} and {Department.MAX_CODE}",
    )


def department_code_unused(company: Company) -> Rule[int]:
    return Rule(
        lambda code: company.find_department(code) is None,
        f"That {DEPARTMENT_CODE} is already in use",
    )


def department_code_exists(company: Company) -> Rule[int]:
    return Rule(
        lambda code: company.find_department(code) is not None,
        f"That {DEPARTMENT_CODE} does not exist",
    )


def department_not_in_use(company: Company) -> Rule[int]:
    return Rule(
        lambda code: not company.is_department_in_use(code),
        "That department still has staff assigned",
    )


# --- Staff number ---


def staff_number_in_range() -> Rule[int]:
    return Rule(
        Staff.number_in_range,
        f"Enter the {STAFF_NUMBER} between {Staff.MIN_NUMBER} and {Staff.MAX_NUMBER}",
    )


def staff_number_unused(company: Company) -> Rule[int]:
    return Rule(
        lambda number: company.find_staff(number) is None,
        f"That {STAFF_NUMBER} is already in use",
    )


def staff_number_exists(company: Company) -> Rule[int]:
    return Rule(
        lambda number: company.find_staff(number) is not None,
        f"That {STAFF_NUMBER} does not exist",
    )
