# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Education Centre Roster
=======================
Interactive console tool for an in-memory roster of Teachers, Admins and
Students: add, view all, view by role, edit and delete.

Nothing is persisted; the roster lives for one session.
"""

from roster.core.config import settings
from roster.core.dependencies import build_controller
from roster.core.logging import get_logger
from roster.controllers.menu_controller import GOODBYE

logger = get_logger(__name__)


def main() -> int:
    logger.info("Session started: version=%s", settings.SERVICE_VERSION)
    controller = build_controller()
    try:
        controller.run()
    except (EOFError, KeyboardInterrupt):
        # Input closed or interrupted mid-prompt: leave like a normal exit.
        print()
        print(GOODBYE)
        logger.info("Session ended by end of input")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
