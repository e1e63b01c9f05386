# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Per-variant edit screens, dispatched on the record's role tag.
Each editor only collects values; the service validates and stores them.
"""

from typing import Any, Callable

from roster.controllers.prompts import Prompter
from roster.core.terminal import Console
from roster.models.domain import ADMIN, STUDENT, TEACHER, Admin, Person, Student, Teacher
from roster.services.formatting import format_hours


def _edit_contact(record: Person, prompter: Prompter) -> dict[str, Any]:
    return {
        "name": prompter.read_non_empty(f"Name ({record.name}): ", record.name),
        "telephone": prompter.read_telephone(
            f"Telephone ({record.telephone}): ", record.telephone
        ),
        "email": prompter.read_gmail(f"Email ({record.email}): ", record.email),
    }


def edit_teacher(record: Teacher, prompter: Prompter) -> dict[str, Any]:
    changes = _edit_contact(record, prompter)
    changes["salary"] = prompter.read_int(f"Salary ({record.salary}): ", record.salary)
    changes["subject1"] = prompter.read_non_empty(
        f"Subject 1 ({record.subject1}): ", record.subject1
    )
    changes["subject2"] = prompter.read_non_empty(
        f"Subject 2 ({record.subject2}): ", record.subject2
    )
    return changes


def edit_admin(record: Admin, prompter: Prompter) -> dict[str, Any]:
    changes = _edit_contact(record, prompter)
    changes["salary"] = prompter.read_int(f"Salary ({record.salary}): ", record.salary)
    changes["employment_type"] = prompter.read_employment_type(
        f"Employment type ({record.employment_type}): ", record.employment_type
    )
    changes["working_hours"] = prompter.read_float(
        f"Working hours ({format_hours(record.working_hours)}): ",
        record.working_hours,
    )
    return changes


def edit_student(record: Student, prompter: Prompter) -> dict[str, Any]:
    changes = _edit_contact(record, prompter)
    for field, label in (
        ("subject1", "Subject 1"),
        ("subject2", "Subject 2"),
        ("subject3", "Subject 3"),
    ):
        current = getattr(record, field)
        changes[field] = prompter.read_non_empty(f"{label} ({current}): ", current)
    return changes


EDITORS: dict[str, Callable[[Person, Prompter], dict[str, Any]]] = {
    TEACHER: edit_teacher,
    ADMIN: edit_admin,
    STUDENT: edit_student,
}


def collect_edits(record: Person, prompter: Prompter, console: Console) -> dict[str, Any]:
    """Draw the edit screen for ``record`` and return the values entered."""
    console.clear()
    console.write(f"Editing {record.role} (press Enter to keep current value).")
    return EDITORS[record.role](record, prompter)
