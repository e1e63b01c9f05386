# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Console I/O: line input, line output, and the single-screen contract.
Every screen clears what was drawn before it; off a TTY clearing is a no-op.
"""

import sys
from typing import Callable, Optional, TextIO

from roster.core.config import settings

CLEAR_SEQUENCE = "\033[2J\033[H"
RETURN_TO_MENU = "Press Enter to return to main menu..."


class Console:
    """Thin wrapper over input()/print() so flows can be scripted in tests."""

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        stream: Optional[TextIO] = None,
        clear_screen: Optional[bool] = None,
    ) -> None:
        self._input = input_func or input
        self._stream = stream if stream is not None else sys.stdout
        self._clear_enabled = settings.CLEAR_SCREEN if clear_screen is None else clear_screen
        self.screens_drawn = 0

    def read_line(self, prompt: str = "") -> str:
        """Read one line; EOFError propagates to the caller."""
        return self._input(prompt)

    def write(self, text: str = "") -> None:
        print(text, file=self._stream)

    def clear(self) -> None:
        self.screens_drawn += 1
        if self._clear_enabled and self._stream.isatty():
            self._stream.write(CLEAR_SEQUENCE)
            self._stream.flush()

    def pause(self, message: str = RETURN_TO_MENU) -> None:
        """Wait for an acknowledgement keystroke."""
        self.write()
        self.write(message)
        self.read_line()
