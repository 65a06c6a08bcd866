"""
app.py
──────
Toner Tracker: host process for the depletion engine.

Startup sequence:
  1. Configure logging
  2. Initialize SQLite store and seed a demo fleet on first run
  3. Run a catch-up cycle every UPDATE_INTERVAL_S seconds
"""
import logging
import time

from config.log import setup_logging
from config.settings import settings
from src.data.clock import SystemClock
from src.data.refresh import refresh_fleet
from src.data.store import initialize_db

logger = logging.getLogger("app")


def main() -> None:
    # ── 1. Logging ────────────────────────────────────────────────────────────
    setup_logging(settings.LOG_LEVEL, settings.LOG_DIR or None)

    # ── 2. Store ──────────────────────────────────────────────────────────────
    logger.info("Initializing store at %s", settings.DATABASE_URL)
    initialize_db()

    # ── 3. Catch-up loop ──────────────────────────────────────────────────────
    clock = SystemClock()
    while True:
        refresh_fleet(clock.now(), stale_hours=settings.STALE_HOURS)
        time.sleep(settings.UPDATE_INTERVAL_S)


if __name__ == "__main__":
    main()
