# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Dependency wiring: build repository, service, prompter and controller.
Nothing is module-global, so every session (and every test) gets its own roster.
"""

from typing import Optional

from roster.controllers.menu_controller import MenuController
from roster.controllers.prompts import Prompter
from roster.core.config import settings
from roster.core.terminal import Console
from roster.repositories.record_repository import RecordRepository
from roster.services.roster_service import RosterService


def build_service(record_repo: Optional[RecordRepository] = None) -> RosterService:
    return RosterService(record_repo=record_repo or RecordRepository())


def build_controller(
    console: Optional[Console] = None,
    service: Optional[RosterService] = None,
    seed: Optional[bool] = None,
) -> MenuController:
    """Wire a ready-to-run menu controller, seeding demo records if enabled."""
    console = console or Console()
    service = service or build_service()
    if seed is None:
        seed = settings.SEED_DEMO_RECORDS
    if seed:
        service.seed_defaults()
    return MenuController(service=service, prompter=Prompter(console), console=console)
