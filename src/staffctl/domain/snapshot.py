"""Snapshot models and conversion for the persisted company format.

Wire shape (UTF-8, indented JSON)::

    {
      "Version": "0.1",
      "SerializableDepartmentList": [{"Code": 181, "Name": "Dev"}],
      "SerializableStaffList": [
        {"Number": 826, "Name": "Taro", "Ruby": "タロウ", "DepartmentCode": 181}
      ]
    }

Staff records store their department by code. :func:`from_snapshot`
resolves every code against the departments loaded from the same
snapshot and refuses unknown codes rather than dropping the record.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from staffctl.domain.company import DEFAULT_VERSION, Company
from staffctl.domain.errors import SerializeError
from staffctl.domain.models import Department, Staff

T = TypeVar("T", bound=BaseModel)


class DepartmentRecord(BaseModel):
    """One entry of ``SerializableDepartmentList``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: int = Field(alias="Code")
    name: str = Field(alias="Name")

    @classmethod
    def from_department(cls, department: Department) -> DepartmentRecord:
        return cls(code=department.code, name=department.name)


class StaffRecord(BaseModel):
    """One entry of ``SerializableStaffList`` — department replaced by its code."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number: int = Field(alias="Number")
    name: str = Field(alias="Name")
    ruby: str = Field(alias="Ruby")
    department_code: int = Field(alias="DepartmentCode")

    @classmethod
    def from_staff(cls, staff: Staff) -> StaffRecord:
        return cls(
            number=staff.number,
            name=staff.name,
            ruby=staff.ruby,
            department_code=staff.department.code,
        )


class CompanySnapshot(BaseModel):
    """Root object of the persisted file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str = Field(default=DEFAULT_VERSION, alias="Version")
    departments: list[DepartmentRecord] = Field(
        default_factory=list, alias="SerializableDepartmentList"
    )
    staffs: list[StaffRecord] = Field(default_factory=list, alias="SerializableStaffList")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)

    @classmethod
    def from_json(cls, raw: str) -> CompanySnapshot:
        """Parse *raw* JSON text, raising :class:`SerializeError` when malformed."""
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            msg = f"Malformed company file: {exc.error_count()} error(s)"
            raise SerializeError(msg) from exc


def to_snapshot(company: Company) -> CompanySnapshot:
    """Convert a live company into its wire snapshot."""
    return CompanySnapshot(
        version=company.version,
        departments=[DepartmentRecord.from_department(d) for d in company.departments],
        staffs=[StaffRecord.from_staff(s) for s in company.staffs],
    )


def from_snapshot(snapshot: CompanySnapshot) -> Company:
    """Rebuild a company from *snapshot*, resolving department codes.

    Raises:
        SerializeError: A record violates an entity range, a code or number
            appears twice, or a staff record names an unknown department.
    """
    departments: dict[int, Department] = {}
    for record in snapshot.departments:
        if record.code in departments:
            msg = f"Duplicate department code: {record.code}"
            raise SerializeError(msg)
        departments[record.code] = _build(Department, code=record.code, name=record.name)

    staffs: list[Staff] = []
    numbers: set[int] = set()
    for record in snapshot.staffs:
        department = departments.get(record.department_code)
        if department is None:
            msg = (
                f"There is no corresponding department code {record.department_code} "
                f"for staff {record.number}"
            )
            raise SerializeError(msg)
        if record.number in numbers:
            msg = f"Duplicate staff number: {record.number}"
            raise SerializeError(msg)
        numbers.add(record.number)
        staffs.append(
            _build(
                Staff,
                number=record.number,
                name=record.name,
                ruby=record.ruby,
                department=department,
            )
        )

    return Company(departments.values(), staffs, version=snapshot.version)


def _build(model_cls: type[T], **fields: object) -> T:
    """Construct an entity, translating validation failures into SerializeError."""
    try:
        return model_cls(**fields)
    except ValidationError as exc:
        msg = f"Invalid {model_cls.__name__.lower()} record: {exc.errors()[0]['msg']}"
        raise SerializeError(msg) from exc
