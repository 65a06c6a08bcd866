"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the Toner Tracker test suite.
"""
import os
from datetime import datetime, timedelta, timezone

import pytest

# Use in-memory SQLite for tests
os.environ.setdefault("DATABASE_URL", ":memory:")
os.environ.setdefault("DEMO_PRINTERS", "6")
os.environ.setdefault("SIMULATION_SEED", "42")
os.environ.setdefault("DEFAULT_LANG", "es")


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def mono_printer(now):
    """Monochrome printer last snapshotted 72 h ago (2000-page toner, 100 pages/day)."""
    from src.data.models import Printer, PrinterType
    return Printer(
        id="PRN-MONO",
        brand="HP",
        model="M406",
        location="Piso 2",
        sede="Sede Central",
        serial="SN100200",
        type=PrinterType.MONOCHROME,
        daily_usage=100,
        toner_model="W9004mc",
        toner_capacity=2000,
        current_toner_level=100.0,
        updated_at=now - timedelta(hours=72),
    )


@pytest.fixture
def color_printer(now):
    """Color printer with C/M/Y reservoirs at 80 / 5 / 50 %, snapshotted now."""
    from config.consumables import TonerColor
    from src.data.models import ColorToner, Printer, PrinterType
    return Printer(
        id="PRN-COLOR",
        brand="LEXMARK",
        model="CS735",
        type=PrinterType.COLOR,
        daily_usage=100,
        toner_model="MULTI-COLOR",
        toner_capacity=10_000,
        color_toners=[
            ColorToner(id="tc", color=TonerColor.CYAN, model="71C0H-C", capacity=10_000, current_level=80.0),
            ColorToner(id="tm", color=TonerColor.MAGENTA, model="71C0H-M", capacity=10_000, current_level=5.0),
            ColorToner(id="ty", color=TonerColor.YELLOW, model="71C0H-Y", capacity=10_000, current_level=50.0),
        ],
        updated_at=now,
    )


@pytest.fixture
def empty_color_printer(now):
    from src.data.models import Printer, PrinterType
    return Printer(id="PRN-EMPTY", type=PrinterType.COLOR, daily_usage=100, updated_at=now)


@pytest.fixture
def fuser(now):
    """100 000-page fuser, 1000 pages in, snapshotted 48 h ago."""
    from src.data.models import Fuser
    return Fuser(
        id="FUS-MONO",
        printer_id="PRN-MONO",
        fuser_model="HP-FSR-100K",
        lifespan=100_000,
        pages_used=1000.0,
        last_update=now - timedelta(hours=48),
    )


@pytest.fixture
def fresh_store():
    """Empty in-memory store with the schema in place."""
    from src.data import store
    store.close()
    store.init_schema()
    yield store
    store.close()
