"""Typed payload contracts for service and adapter boundaries.

These models validate operation payload shapes before they leave the
service layer so key regressions (for example ``items`` vs ``results``)
fail fast in tests and during development.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel

if TYPE_CHECKING:
    from staffctl.domain.models import Department, Staff

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class DepartmentItem(BaseModel):
    """One department row."""

    code: int
    name: str


class StaffItem(BaseModel):
    """One staff row, with the department flattened to code and name."""

    number: int
    name: str
    ruby: str
    department_code: int
    department_name: str


class DepartmentListData(BaseModel):
    """Payload contract for ``list_departments`` / ``search_departments``."""

    query: str | None = None
    count: int
    items: list[DepartmentItem]


class StaffListData(BaseModel):
    """Payload contract for ``list_staffs`` / ``search_staffs``."""

    query: str | None = None
    count: int
    items: list[StaffItem]


def department_item(department: Department) -> dict[str, Any]:
    return {"code": department.code, "name": department.name}


def staff_item(staff: Staff) -> dict[str, Any]:
    return {
        "number": staff.number,
        "name": staff.name,
        "ruby": staff.ruby,
        "department_code": staff.department.code,
        "department_name": staff.department.name,
    }
