"""
src/data/simulator.py
─────────────────────
Reproducible demo fleet for seeding an empty store.

Generates:
  - A mix of monochrome and color (CMYK) printers spread over sedes
  - One fuser per printer, partway through its lifespan
  - Stale snapshots (0–96 h old) so the first catch-up has work to do

Reproducible with SIMULATION_SEED for consistent demos.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

import numpy as np

from config.consumables import TonerColor
from config.settings import settings
from src.data.models import ColorToner, Fuser, Printer, PrinterStatus, PrinterType

SEDES = ["Sede Central", "Sede Norte", "Sede Sur", "Almacén"]

MONO_MODELS: list[dict] = [
    {"brand": "LEXMARK", "model": "MS821", "toner_model": "58D4U00", "capacity": 55_000},
    {"brand": "HP", "model": "M406", "toner_model": "W9004mc", "capacity": 11_000},
    {"brand": "KYOCERA", "model": "P3145dn", "toner_model": "TK-3162", "capacity": 12_500},
]

COLOR_MODELS: list[dict] = [
    {"brand": "HP", "model": "E57540", "toner_prefix": "W9000", "capacity": 10_500},
    {"brand": "LEXMARK", "model": "CS735", "toner_prefix": "71C0H", "capacity": 7_000},
]

FUSER_LIFESPANS = [100_000, 150_000, 200_000]

CMYK = [TonerColor.CYAN, TonerColor.MAGENTA, TonerColor.YELLOW, TonerColor.BLACK]

# Share of the fleet per status (operational, available, backup, retired)
STATUS_WEIGHTS = [0.82, 0.08, 0.06, 0.04]


def _pick(rng: np.random.Generator, items: list):
    return items[int(rng.integers(0, len(items)))]


def _color_toners(entry: dict, rng: np.random.Generator) -> list[ColorToner]:
    return [
        ColorToner(
            color=color,
            model=f"{entry['toner_prefix']}-{color.value[0].upper()}",
            capacity=entry["capacity"],
            current_level=round(float(rng.uniform(4.0, 100.0)), 2),
        )
        for color in CMYK
    ]


def generate_printer(index: int, now: datetime, rng: np.random.Generator) -> Printer:
    is_color = bool(rng.random() < 0.25)
    status = PrinterStatus(rng.choice([s.value for s in PrinterStatus], p=STATUS_WEIGHTS))
    updated_at = now - timedelta(hours=int(rng.integers(0, 97)))
    common = {
        "id": f"PRN-{index:03d}",
        "location": f"Piso {int(rng.integers(1, 8))}",
        "sede": _pick(rng, SEDES),
        "serial": f"SN{int(rng.integers(100_000, 999_999))}",
        "ip": f"10.0.{int(rng.integers(1, 20))}.{int(rng.integers(2, 254))}",
        "status": status,
        "daily_usage": int(rng.integers(20, 401)),
        "created_at": updated_at - timedelta(days=int(rng.integers(30, 720))),
        "updated_at": updated_at,
    }

    if is_color:
        entry = _pick(rng, COLOR_MODELS)
        return Printer(
            **common,
            brand=entry["brand"],
            model=entry["model"],
            type=PrinterType.COLOR,
            toner_model="MULTI-COLOR",
            toner_capacity=entry["capacity"],
            color_toners=_color_toners(entry, rng),
        )

    entry = _pick(rng, MONO_MODELS)
    return Printer(
        **common,
        brand=entry["brand"],
        model=entry["model"],
        type=PrinterType.MONOCHROME,
        toner_model=entry["toner_model"],
        toner_capacity=entry["capacity"],
        current_toner_level=round(float(rng.uniform(3.0, 100.0)), 2),
    )


def generate_fuser(printer: Printer, now: datetime, rng: np.random.Generator) -> Fuser:
    lifespan = _pick(rng, FUSER_LIFESPANS)
    last_update = now - timedelta(hours=int(rng.integers(0, 97)))
    return Fuser(
        id=f"FUS-{printer.id}",
        printer_id=printer.id,
        fuser_model=f"{printer.brand}-FSR-{lifespan // 1000}K",
        lifespan=lifespan,
        pages_used=float(int(rng.uniform(0.0, 0.95) * lifespan)),
        installation_date=last_update - timedelta(days=int(rng.integers(10, 400))),
        last_update=last_update,
        updated_at=last_update,
    )


def generate_fleet(
    seed: int = settings.SIMULATION_SEED,
    count: int = settings.DEMO_PRINTERS,
    now: datetime | None = None,
) -> tuple[list[Printer], list[Fuser]]:
    """Return ``count`` printers and one fuser per printer."""
    rng = np.random.default_rng(seed)
    now = now or datetime.now(tz=UTC).replace(minute=0, second=0, microsecond=0)
    printers = [generate_printer(i + 1, now, rng) for i in range(count)]
    fusers = [generate_fuser(p, now, rng) for p in printers]
    return printers, fusers
