# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Roster error hierarchy.
Raised by the service layer, turned into screen messages by the controller.
"""

from typing import Optional


class RosterError(Exception):
    """Base error carrying the message shown to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RecordNotFoundError(RosterError):
    def __init__(self, record_id: int, message: str = "Record not found.") -> None:
        super().__init__(message)
        self.record_id = record_id


class NoRecordsError(RosterError):
    """The roster is empty."""

    def __init__(self, message: str = "No records found.") -> None:
        super().__init__(message)


class NoMatchingRecordsError(RosterError):
    def __init__(
        self,
        role: Optional[str],
        message: str = "No records found for the given role.",
    ) -> None:
        super().__init__(message)
        self.role = role
