# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models: pure data structures, NO console dependency.

A roster record is one of three variants tagged by ``role``. The tag and the
identifier are frozen; every other assignment is re-validated, so a stored
record can never hold a malformed telephone, email or employment type.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from roster.services.validation import (
    check_employment_type,
    check_gmail,
    check_non_empty,
    check_telephone,
    require_valid,
)

TEACHER = "Teacher"
ADMIN = "Admin"
STUDENT = "Student"
ROLES = (TEACHER, ADMIN, STUDENT)


class ContactDetails(BaseModel):
    """Identity and contact fields shared by every record kind."""

    model_config = ConfigDict(validate_assignment=True)

    name: str
    telephone: str
    email: str

    @field_validator("name")
    @classmethod
    def normalise_name(cls, v: str) -> str:
        return require_valid(check_non_empty(v))

    @field_validator("telephone")
    @classmethod
    def digits_only_telephone(cls, v: str) -> str:
        return require_valid(check_telephone(v))

    @field_validator("email")
    @classmethod
    def gmail_address(cls, v: str) -> str:
        return require_valid(check_gmail(v))


class Person(ContactDetails):
    id: int = Field(..., ge=1, frozen=True)


class Teacher(Person):
    role: Literal["Teacher"] = Field(default=TEACHER, frozen=True)
    salary: int
    subject1: str = ""
    subject2: str = ""


class Admin(Person):
    role: Literal["Admin"] = Field(default=ADMIN, frozen=True)
    salary: int
    employment_type: str
    working_hours: float = Field(..., allow_inf_nan=False)

    @field_validator("employment_type")
    @classmethod
    def canonical_employment_type(cls, v: str) -> str:
        return require_valid(check_employment_type(v))


class Student(Person):
    role: Literal["Student"] = Field(default=STUDENT, frozen=True)
    subject1: str = ""
    subject2: str = ""
    subject3: str = ""


Record = Annotated[Union[Teacher, Admin, Student], Field(discriminator="role")]

RECORD_ADAPTER: TypeAdapter = TypeAdapter(Record)

RECORD_TYPES: dict[str, type[Person]] = {
    TEACHER: Teacher,
    ADMIN: Admin,
    STUDENT: Student,
}
