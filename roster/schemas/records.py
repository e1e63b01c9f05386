# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Creation payloads: the fields the Add flow collects, before an id exists.
Subjects are taken as typed; they are only required non-empty on edit.
"""

from typing import ClassVar

from pydantic import Field, field_validator

from roster.models.domain import ADMIN, STUDENT, TEACHER, ContactDetails
from roster.services.validation import check_employment_type, require_valid


class TeacherCreate(ContactDetails):
    ROLE: ClassVar[str] = TEACHER

    salary: int
    subject1: str = ""
    subject2: str = ""


class AdminCreate(ContactDetails):
    ROLE: ClassVar[str] = ADMIN

    salary: int
    employment_type: str
    working_hours: float = Field(..., allow_inf_nan=False)

    @field_validator("employment_type")
    @classmethod
    def canonical_employment_type(cls, v: str) -> str:
        return require_valid(check_employment_type(v))


class StudentCreate(ContactDetails):
    ROLE: ClassVar[str] = STUDENT

    subject1: str = ""
    subject2: str = ""
    subject3: str = ""


RecordCreate = TeacherCreate | AdminCreate | StudentCreate
