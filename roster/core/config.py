# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration: all env-driven, read once at import.
Only ambient behaviour is tunable here; roster rules are fixed.
"""

import os


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "roster")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    LOG_FILE: str = os.getenv("LOG_FILE", "")

    CLEAR_SCREEN: bool = _env_bool("CLEAR_SCREEN", "true")
    CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "$")
    SEED_DEMO_RECORDS: bool = _env_bool("SEED_DEMO_RECORDS", "false")


settings = Settings()
