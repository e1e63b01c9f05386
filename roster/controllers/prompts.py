# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Validation helpers: prompt, read, validate, retry until the input is good.

There is no retry limit. When a ``current`` value is supplied (edit flows),
a blank answer keeps it: for text fields only if it is non-empty, for
numeric fields whenever it is not None.
"""

from decimal import Decimal
from typing import Any, Callable, Optional

from roster.core.logging import get_logger
from roster.core.terminal import Console
from roster.services.validation import (
    Validated,
    check_decimal,
    check_employment_type,
    check_float,
    check_gmail,
    check_int,
    check_non_empty,
    check_telephone,
    is_blank,
)

logger = get_logger(__name__)


class Prompter:
    """Interactive field readers bound to one console."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def _read_until_valid(
        self,
        prompt: str,
        check: Callable[[str], Validated],
        keep_current: bool = False,
        current: Any = None,
    ) -> Any:
        while True:
            raw = self._console.read_line(prompt)
            if keep_current and is_blank(raw):
                return current
            result = check(raw)
            if result.ok:
                return result.value
            logger.debug("Input rejected: prompt=%r, reason=%s", prompt, result.error)
            self._console.write(result.error)

    def _read_text(self, prompt: str, check, current: Optional[str]) -> str:
        return self._read_until_valid(
            prompt, check, keep_current=not is_blank(current), current=current
        )

    def _read_number(self, prompt: str, check, current):
        return self._read_until_valid(
            prompt, check, keep_current=current is not None, current=current
        )

    # ── Text ──

    def read_non_empty(self, prompt: str, current: Optional[str] = None) -> str:
        return self._read_text(prompt, check_non_empty, current)

    def read_telephone(self, prompt: str, current: Optional[str] = None) -> str:
        return self._read_text(prompt, check_telephone, current)

    def read_gmail(self, prompt: str, current: Optional[str] = None) -> str:
        return self._read_text(prompt, check_gmail, current)

    def read_employment_type(self, prompt: str, current: Optional[str] = None) -> str:
        return self._read_text(prompt, check_employment_type, current)

    def read_raw(self, prompt: str) -> str:
        """Free text, taken exactly as typed."""
        return self._console.read_line(prompt)

    # ── Numbers ──

    def read_int(self, prompt: str, current: Optional[int] = None) -> int:
        return self._read_number(prompt, check_int, current)

    def read_float(self, prompt: str, current: Optional[float] = None) -> float:
        return self._read_number(prompt, check_float, current)

    def read_decimal(self, prompt: str, current: Optional[Decimal] = None) -> Decimal:
        return self._read_number(prompt, check_decimal, current)

    # ── Confirmation ──

    def confirm(self, prompt: str) -> bool:
        """Only 'y' or 'Y' counts as yes."""
        return self._console.read_line(prompt).strip().lower() == "y"
