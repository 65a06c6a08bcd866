"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Database (SQLite path; ":memory:" for tests)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "toner_tracker.db")

    # Catch-up cadence for the host loop, in seconds
    UPDATE_INTERVAL_S: int = int(os.getenv("UPDATE_INTERVAL_S", "3600"))

    # Demo fleet seeding
    SIMULATION_SEED: int = int(os.getenv("SIMULATION_SEED", "42"))
    DEMO_PRINTERS: int = int(os.getenv("DEMO_PRINTERS", "24"))

    # i18n
    DEFAULT_LANG: str = os.getenv("DEFAULT_LANG", "es")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "")

    # Printers without a catch-up for this long are reported as stale
    STALE_HOURS: int = int(os.getenv("STALE_HOURS", "24"))


settings = Settings()
