"""CompanyService — list/search/add/remove for departments and staff.

The non-interactive face of the company aggregate, shared by the CLI
subcommands and the MCP adapter. Each operation takes plain arguments
and returns a :class:`ServiceResult`.

INVARIANT: With ``autosave`` on, every successful mutation is followed by
a full save. Callers are sequential; nothing here is thread-safe.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from staffctl.domain.errors import SerializeError
from staffctl.domain.models import Department, Staff
from staffctl.services.contracts import (
    DepartmentListData,
    StaffListData,
    department_item,
    dump_validated,
    staff_item,
)
from staffctl.services.result import ServiceResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from staffctl.domain.company import Company
    from staffctl.infrastructure.storage import CompanyStore

logger = logging.getLogger(__name__)


class CompanyService:
    """Service-layer operations over a :class:`CompanyStore`.

    Usage::

        service = CompanyService(CompanyStore(Path("staffctl.json")))
        result = service.add_department(181, "Dev")
        assert result.ok
    """

    def __init__(self, store: CompanyStore, *, autosave: bool = True) -> None:
        self._store = store
        self._autosave = autosave

    # --- Departments ---

    def list_departments(self) -> ServiceResult:
        return self._run("list_departments", lambda c: _department_list(c, None))

    def search_departments(self, search_text: str) -> ServiceResult:
        return self._run("search_departments", lambda c: _department_list(c, search_text))

    def add_department(self, code: int, name: str) -> ServiceResult:
        op = "add_department"

        def _add(company: Company) -> ServiceResult:
            try:
                department = Department(code=code, name=name)
            except ValidationError as exc:
                return _invalid_input(op, exc)
            if company.find_department(code) is not None:
                return ServiceResult.failure(
                    op, "duplicate_key", f"Department code {code} is already in use", code=code
                )
            company.add_department(department)
            return self._committed(op, department_item(department))

        return self._run(op, _add)

    def remove_department(self, code: int) -> ServiceResult:
        op = "remove_department"

        def _remove(company: Company) -> ServiceResult:
            if company.find_department(code) is None:
                return ServiceResult.failure(
                    op, "not_found", f"No department with code {code}", code=code
                )
            if not company.remove_department(code):
                return ServiceResult.failure(
                    op,
                    "department_in_use",
                    f"Department {code} still has staff assigned",
                    code=code,
                )
            return self._committed(op, {"code": code})

        return self._run(op, _remove)

    # --- Staff ---

    def list_staffs(self) -> ServiceResult:
        return self._run("list_staffs", lambda c: _staff_list(c, None))

    def search_staffs(self, search_text: str) -> ServiceResult:
        return self._run("search_staffs", lambda c: _staff_list(c, search_text))

    def add_staff(
        self,
        number: int,
        name: str,
        ruby: str,
        department_code: int,
    ) -> ServiceResult:
        op = "add_staff"

        def _add(company: Company) -> ServiceResult:
            department = company.find_department(department_code)
            if department is None:
                return ServiceResult.failure(
                    op,
                    "unknown_department",
                    f"No department with code {department_code}",
                    department_code=department_code,
                )
            try:
                staff = Staff(number=number, name=name, ruby=ruby, department=department)
            except ValidationError as exc:
                return _invalid_input(op, exc)
            if company.find_staff(number) is not None:
                return ServiceResult.failure(
                    op, "duplicate_key", f"Staff number {number} is already in use", number=number
                )
            company.add_staff(staff)
            return self._committed(op, staff_item(staff))

        return self._run(op, _add)

    def remove_staff(self, number: int) -> ServiceResult:
        op = "remove_staff"

        def _remove(company: Company) -> ServiceResult:
            if not company.remove_staff(number):
                return ServiceResult.failure(
                    op, "not_found", f"No staff with number {number}", number=number
                )
            return self._committed(op, {"number": number})

        return self._run(op, _remove)

    # --- Internals ---

    def _run(self, op: str, action: Callable[[Company], ServiceResult]) -> ServiceResult:
        """Load the company (once) and apply *action* to it."""
        try:
            company = self._store.company
        except SerializeError as exc:
            return _serialization_failure(op, exc)
        return action(company)

    def _committed(self, op: str, data: dict[str, Any]) -> ServiceResult:
        """Persist after a successful mutation and build the result.

        A failed save discards the unsaved change, so the company in
        memory always matches the data file.
        """
        if self._autosave:
            try:
                self._store.save()
            except SerializeError as exc:
                self._store.discard()
                return _serialization_failure(op, exc)
        logger.info("%s: %s", op, data)
        return ServiceResult.success(op, data)


def _department_list(company: Company, search_text: str | None) -> ServiceResult:
    op = "list_departments" if search_text is None else "search_departments"
    departments = company.get_departments(search_text or "")
    data = dump_validated(
        DepartmentListData,
        {
            "query": search_text,
            "count": len(departments),
            "items": [department_item(d) for d in departments],
        },
    )
    return ServiceResult.success(op, data)


def _staff_list(company: Company, search_text: str | None) -> ServiceResult:
    op = "list_staffs" if search_text is None else "search_staffs"
    staffs = company.get_staffs(search_text or "")
    data = dump_validated(
        StaffListData,
        {
            "query": search_text,
            "count": len(staffs),
            "items": [staff_item(s) for s in staffs],
        },
    )
    return ServiceResult.success(op, data)


def _invalid_input(op: str, exc: ValidationError) -> ServiceResult:
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    return ServiceResult.failure(op, "invalid_input", f"{field}: {first['msg']}", field=field)


def _serialization_failure(op: str, exc: SerializeError) -> ServiceResult:
    logger.error("%s failed: %s", op, exc)
    return ServiceResult.failure(op, "serialization_error", str(exc))
