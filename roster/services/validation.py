# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Field validation as pure functions, no I/O, no logging.
Each check takes one raw input line and returns a Validated result.
"""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, NamedTuple, Optional

GMAIL_SUFFIX = "@gmail.com"
EMPLOYMENT_TYPES = ("Full-time", "Part-time")
INT64_MAX = 2**63 - 1

EMPTY_MESSAGE = "Value cannot be empty. Please try again."
INT_MESSAGE = "Invalid integer. Please try again."
NUMBER_MESSAGE = "Invalid number. Please try again."
TELEPHONE_MESSAGE = "Invalid telephone. Please enter digits only (no letters or symbols)."
EMAIL_MESSAGE = "Invalid email. Email must end with '@gmail.com'. Please try again."
EMPLOYMENT_TYPE_MESSAGE = (
    "Invalid employment type. Enter exactly 'Full-time' or 'Part-time'."
)

_DIGITS = re.compile(r"^[0-9]+$")
_SIGNED_DIGITS = re.compile(r"^[+-]?[0-9]+$")


class Validated(NamedTuple):
    """Outcome of a check: the normalised value, or the reason it failed."""

    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def require_valid(result: Validated) -> Any:
    """Unwrap a check for use inside a pydantic validator."""
    if not result.ok:
        raise ValueError(result.error)
    return result.value


def is_blank(raw: Optional[str]) -> bool:
    return raw is None or not raw.strip()


def check_non_empty(raw: Optional[str]) -> Validated:
    if is_blank(raw):
        return Validated(error=EMPTY_MESSAGE)
    return Validated(raw.strip())


def check_int(raw: Optional[str]) -> Validated:
    """Optional sign and ASCII digits; no underscores or other scripts."""
    if raw is None or not _SIGNED_DIGITS.match(raw.strip()):
        return Validated(error=INT_MESSAGE)
    try:
        return Validated(int(raw))
    except ValueError:  # beyond the interpreter's int-parsing digit limit
        return Validated(error=INT_MESSAGE)


def check_float(raw: Optional[str]) -> Validated:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return Validated(error=NUMBER_MESSAGE)
    if not math.isfinite(value):
        return Validated(error=NUMBER_MESSAGE)
    return Validated(value)


def check_decimal(raw: Optional[str]) -> Validated:
    try:
        value = Decimal(raw.strip())
    except (AttributeError, InvalidOperation):
        return Validated(error=NUMBER_MESSAGE)
    if not value.is_finite():
        return Validated(error=NUMBER_MESSAGE)
    return Validated(value)


def check_telephone(raw: Optional[str]) -> Validated:
    """Digits only, and the number must fit a signed 64-bit integer."""
    if is_blank(raw):
        return Validated(error=TELEPHONE_MESSAGE)
    trimmed = raw.strip()
    if not _DIGITS.match(trimmed):
        return Validated(error=TELEPHONE_MESSAGE)
    try:
        number = int(trimmed)
    except ValueError:  # beyond the interpreter's int-parsing digit limit
        return Validated(error=TELEPHONE_MESSAGE)
    if number > INT64_MAX:
        return Validated(error=TELEPHONE_MESSAGE)
    return Validated(trimmed)


def check_gmail(raw: Optional[str]) -> Validated:
    if is_blank(raw):
        return Validated(error=EMAIL_MESSAGE)
    trimmed = raw.strip()
    if not trimmed.lower().endswith(GMAIL_SUFFIX):
        return Validated(error=EMAIL_MESSAGE)
    return Validated(trimmed)


def check_employment_type(raw: Optional[str]) -> Validated:
    """Case-insensitive match, normalised to the canonical spelling."""
    if is_blank(raw):
        return Validated(error=EMPLOYMENT_TYPE_MESSAGE)
    wanted = raw.strip().lower()
    for canonical in EMPLOYMENT_TYPES:
        if wanted == canonical.lower():
            return Validated(canonical)
    return Validated(error=EMPLOYMENT_TYPE_MESSAGE)
