# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Roster record data access.
Insertion-ordered in-memory store that also owns identifier allocation.
"""

from typing import Optional

from roster.models.domain import Person


class RecordRepository:
    """In-memory record storage keyed by a never-reused integer id."""

    def __init__(self) -> None:
        self._records: list[Person] = []
        self._next_id = 1

    # ── Identifiers ──

    @property
    def next_id(self) -> int:
        """The id the next stored record must carry."""
        return self._next_id

    # ── Read ──

    def get_all(self) -> list[Person]:
        return list(self._records)

    def get_by_id(self, record_id: int) -> Optional[Person]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def get_by_role(self, role: str) -> list[Person]:
        wanted = role.casefold()
        return [r for r in self._records if r.role.casefold() == wanted]

    def exists(self, record_id: int) -> bool:
        return self.get_by_id(record_id) is not None

    def count(self) -> int:
        return len(self._records)

    # ── Write ──

    def add(self, record: Person) -> None:
        if record.id < self._next_id:
            raise ValueError(f"Identifier {record.id} has already been issued")
        self._records.append(record)
        self._next_id = record.id + 1

    def replace(self, record: Person) -> bool:
        """Swap the stored record with the same id, keeping its position."""
        for index, existing in enumerate(self._records):
            if existing.id == record.id:
                self._records[index] = record
                return True
        return False

    def remove(self, record_id: int) -> Optional[Person]:
        for index, existing in enumerate(self._records):
            if existing.id == record_id:
                return self._records.pop(index)
        return None

    # ── Bulk / internal ──

    def clear(self) -> None:
        # Counter is kept: identifiers are never reused.
        self._records.clear()
