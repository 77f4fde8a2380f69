"""Company aggregate — owns the department and staff collections.

INVARIANT: Every staff member's department resolves to a department in
the same company. ``remove_department`` is the only mutation that could
break this, so it refuses while the department is referenced.

Uniqueness of codes and numbers on ``add_*`` is the caller's contract
(wizard rules, :class:`~staffctl.services.company.CompanyService`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from staffctl.domain.models import Department, Staff

DEFAULT_VERSION = "0.1"


class Company:
    """In-memory aggregate of departments and staff.

    Collections are exposed read-only as tuples. All mutation goes
    through the ``add_*`` / ``remove_*`` methods.
    """

    def __init__(
        self,
        departments: Iterable[Department] = (),
        staffs: Iterable[Staff] = (),
        *,
        version: str = DEFAULT_VERSION,
    ) -> None:
        self.version = version
        self._departments: list[Department] = list(departments)
        self._staffs: list[Staff] = list(staffs)

    def __repr__(self) -> str:
        return (
            f"Company(version={self.version!r}, "
            f"departments={len(self._departments)}, staffs={len(self._staffs)})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Company):
            return NotImplemented
        return (
            self.version == other.version
            and self._departments == other._departments
            and self._staffs == other._staffs
        )

    __hash__ = None  # type: ignore[assignment]

    # --- Read access ---

    @property
    def departments(self) -> tuple[Department, ...]:
        return tuple(self._departments)

    @property
    def staffs(self) -> tuple[Staff, ...]:
        return tuple(self._staffs)

    def find_department(self, code: int) -> Department | None:
        return next((d for d in self._departments if d.code == code), None)

    def find_staff(self, number: int) -> Staff | None:
        return next((s for s in self._staffs if s.number == number), None)

    def is_department_in_use(self, code: int) -> bool:
        """Whether any staff member references department *code*."""
        return any(staff.department.code == code for staff in self._staffs)

    def get_departments(self, search_text: str = "") -> list[Department]:
        """Departments whose name contains *search_text* or whose code equals it.

        An empty *search_text* matches every department.
        """
        return [
            department
            for department in self._departments
            if search_text in department.name or str(department.code) == search_text
        ]

    def get_staffs(self, search_text: str = "") -> list[Staff]:
        """Staff matching *search_text* by name, number, or department.

        Name and department name match by substring; staff number and
        department code match by exact decimal string.
        """
        return [
            staff
            for staff in self._staffs
            if search_text in staff.name
            or str(staff.number) == search_text
            or search_text in staff.department.name
            or str(staff.department.code) == search_text
        ]

    # --- Mutation ---

    def add_department(self, department: Department) -> None:
        self._departments.append(department)

    def remove_department(self, code: int) -> bool:
        """Remove department *code*.

        Returns False (and changes nothing) when the code is unknown or a
        staff member still references it.
        """
        if self.is_department_in_use(code):
            return False
        department = self.find_department(code)
        if department is None:
            return False
        self._departments.remove(department)
        return True

    def add_staff(self, staff: Staff) -> None:
        self._staffs.append(staff)

    def remove_staff(self, number: int) -> bool:
        """Remove staff *number*. Returns False when no staff has that number."""
        staff = self.find_staff(number)
        if staff is None:
            return False
        self._staffs.remove(staff)
        return True
