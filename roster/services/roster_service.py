# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Roster management, business logic for CRUD operations.
Coordinates repository writes with id allocation, validation and logging.
"""

from typing import Any

from roster.core.exceptions import (
    NoMatchingRecordsError,
    NoRecordsError,
    RecordNotFoundError,
)
from roster.core.logging import get_logger
from roster.models.domain import RECORD_ADAPTER, RECORD_TYPES, Person
from roster.repositories.record_repository import RecordRepository
from roster.schemas.records import AdminCreate, RecordCreate, StudentCreate, TeacherCreate

logger = get_logger(__name__)


class RosterService:
    """Business logic for the education centre roster."""

    def __init__(self, record_repo: RecordRepository) -> None:
        self._records = record_repo

    # ── Commands ──

    def create_record(self, payload: RecordCreate) -> Person:
        """Build the variant for ``payload`` with the next id and store it."""
        model = RECORD_TYPES[payload.ROLE]
        record = model(id=self._records.next_id, **payload.model_dump())
        self._records.add(record)
        logger.info(
            "Record created: id=%d, role=%s", record.id, record.role,
            extra={"record_id": record.id},
        )
        return record

    def update_record(self, record_id: int, changes: dict[str, Any]) -> Person:
        """
        Apply ``changes`` to a stored record, re-validating the whole record.
        Identifier and role always come from the stored record.
        Raises RecordNotFoundError, or pydantic ValidationError on bad values.
        """
        current = self.get_record(record_id)
        changes = {k: v for k, v in changes.items() if k not in ("id", "role")}
        merged = {**current.model_dump(), **changes}
        updated = RECORD_ADAPTER.validate_python(merged)
        self._records.replace(updated)
        changed = sorted(k for k, v in changes.items() if getattr(current, k, None) != v)
        logger.info(
            "Record updated: id=%d, changed=%s", record_id, changed,
            extra={"record_id": record_id},
        )
        return updated

    def delete_record(self, record_id: int) -> Person:
        """Remove a record. Raises RecordNotFoundError."""
        removed = self._records.remove(record_id)
        if removed is None:
            raise RecordNotFoundError(record_id)
        logger.info(
            "Record deleted: id=%d, role=%s", removed.id, removed.role,
            extra={"record_id": removed.id},
        )
        return removed

    # ── Queries ──

    def list_records(self) -> list[Person]:
        records = self._records.get_all()
        if not records:
            raise NoRecordsError()
        return records

    def get_record(self, record_id: int) -> Person:
        record = self._records.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        return record

    def filter_by_role(self, role: str) -> list[Person]:
        """Case-insensitive exact match on the role tag."""
        matches = self._records.get_by_role((role or "").strip())
        if not matches:
            raise NoMatchingRecordsError(role)
        return matches

    def is_empty(self) -> bool:
        return self._records.count() == 0

    def count(self) -> int:
        return self._records.count()

    # ── Seed ──

    def seed_defaults(self) -> None:
        """Create a small demo roster so every screen has something to show."""
        defaults: list[RecordCreate] = [
            TeacherCreate(
                name="Ana Lopez",
                telephone="1112223333",
                email="ana.lopez@gmail.com",
                salary=50000,
                subject1="Math",
                subject2="Physics",
            ),
            AdminCreate(
                name="Ben Okafor",
                telephone="4445556666",
                email="ben.okafor@gmail.com",
                salary=32000,
                employment_type="Full-time",
                working_hours=40,
            ),
            StudentCreate(
                name="Chloe Martin",
                telephone="7778889999",
                email="chloe.martin@gmail.com",
                subject1="Biology",
                subject2="Chemistry",
                subject3="English",
            ),
        ]
        for payload in defaults:
            self.create_record(payload)
        logger.info("Seeded %d demo records", len(defaults))
