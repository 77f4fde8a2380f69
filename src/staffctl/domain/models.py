"""Department and Staff entity models.

Both entities are frozen pydantic models: construction validates every
declared range, and a constructed value is never partially valid.

INVARIANT: Entities are immutable. Edits are modelled as remove + add.
"""

from __future__ import annotations

from typing import Annotated, ClassVar

from pydantic import BaseModel, Field, StringConstraints

# --- Declared ranges (shared by the models and the acquisition rules) ---

DEPARTMENT_MIN_CODE = 100
DEPARTMENT_MAX_CODE = 999
STAFF_MIN_NUMBER = 1
STAFF_MAX_NUMBER = 9999
NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 30

Name = Annotated[
    str,
    StringConstraints(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH),
]


def name_length_ok(text: str) -> bool:
    """Whether *text* fits the shared name length range."""
    return NAME_MIN_LENGTH <= len(text) <= NAME_MAX_LENGTH


class Department(BaseModel):
    """A department, identified by its three-digit code."""

    model_config = {"frozen": True}

    MIN_CODE: ClassVar[int] = DEPARTMENT_MIN_CODE
    MAX_CODE: ClassVar[int] = DEPARTMENT_MAX_CODE

    code: int = Field(ge=DEPARTMENT_MIN_CODE, le=DEPARTMENT_MAX_CODE)
    name: Name

    @classmethod
    def code_in_range(cls, code: int) -> bool:
        return cls.MIN_CODE <= code <= cls.MAX_CODE


class Staff(BaseModel):
    """A staff member belonging to exactly one department.

    The department is held by value. It acts as a foreign key into the
    owning company's department list; departments never point back.
    """

    model_config = {"frozen": True}

    MIN_NUMBER: ClassVar[int] = STAFF_MIN_NUMBER
    MAX_NUMBER: ClassVar[int] = STAFF_MAX_NUMBER

    number: int = Field(ge=STAFF_MIN_NUMBER, le=STAFF_MAX_NUMBER)
    name: Name
    ruby: Name
    department: Department

    @classmethod
    def number_in_range(cls, number: int) -> bool:
        return cls.MIN_NUMBER <= number <= cls.MAX_NUMBER
