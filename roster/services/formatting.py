# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Record rendering, one line per record, no I/O.
"""

from decimal import Decimal
from typing import Callable

from roster.core.config import settings
from roster.models.domain import ADMIN, STUDENT, TEACHER, Admin, Person, Student, Teacher


def format_money(amount: int, symbol: str | None = None) -> str:
    """50000 -> '$50,000.00'; negatives carry a leading minus. Exact for any int."""
    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{Decimal(abs(amount)):,.2f}"


def format_hours(hours: float) -> str:
    if float(hours).is_integer():
        return str(int(hours))
    return str(hours)


def _teacher_details(record: Teacher) -> str:
    return (
        f" | Salary: {format_money(record.salary)}"
        f" | Subjects: {record.subject1}, {record.subject2}"
    )


def _admin_details(record: Admin) -> str:
    return (
        f" | Salary: {format_money(record.salary)}"
        f" | Type: {record.employment_type}"
        f" | Hours: {format_hours(record.working_hours)}"
    )


def _student_details(record: Student) -> str:
    return f" | Subjects: {record.subject1}, {record.subject2}, {record.subject3}"


_DETAIL_RENDERERS: dict[str, Callable[[Person], str]] = {
    TEACHER: _teacher_details,
    ADMIN: _admin_details,
    STUDENT: _student_details,
}


def render_record(record: Person) -> str:
    base = (
        f"ID: {record.id} | Role: {record.role} | Name: {record.name}"
        f" | Tel: {record.telephone} | Email: {record.email}"
    )
    return base + _DETAIL_RENDERERS[record.role](record)
