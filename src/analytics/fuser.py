"""
src/analytics/fuser.py
──────────────────────
Fuser wear predictor.

Unlike toner, a fuser accumulates absolute pages against a fixed lifespan:

  hourly_pages = daily_usage / 24
  used'        = min(lifespan, used + hours_elapsed × hourly_pages)   when hours_elapsed ≥ 1
  level        = max(0, 100 − used' / lifespan × 100)

Status is level-only (≤ 10 % critical, ≤ 15 % warning).
"""
from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from config.consumables import CATCH_UP
from src.analytics.depletion import round_half_up
from src.analytics.status import classify_fuser_status
from src.data.clock import days_between, hours_between
from src.data.models import Fuser, FuserPrediction, Printer


def predict_fuser(
    daily_usage: int,
    lifespan: int,
    pages_used: float,
    last_update: datetime,
    now: datetime,
) -> FuserPrediction:
    hours = hours_between(last_update, now)
    hourly_pages = max(0, daily_usage) / 24.0

    adjusted_used = float(pages_used)
    if hours >= CATCH_UP.min_hours:
        adjusted_used = min(float(lifespan), pages_used + hours * hourly_pages)

    level = max(0.0, 100.0 - adjusted_used / lifespan * 100.0)
    pages_remaining = max(0.0, lifespan - adjusted_used)

    return FuserPrediction(
        current_level=round(min(level, 100.0), 2),
        pages_remaining=round_half_up(pages_remaining),
        status=classify_fuser_status(level),
        pages_used=max(0, round_half_up(adjusted_used)),
        lifespan=lifespan,
        hours_elapsed=hours,
        days_elapsed=days_between(last_update, now),
        estimated_usage=round_half_up(max(0, hours) * hourly_pages),
    )


def predict_printer_fuser(printer: Printer, fuser: Fuser, now: datetime) -> FuserPrediction:
    """Fuser prediction driven by its printer's effective daily usage."""
    return predict_fuser(
        printer.effective_daily_usage,
        fuser.lifespan,
        fuser.pages_used,
        fuser.last_update,
        now,
    )


def find_fuser(fusers: Iterable[Fuser], printer_id: str) -> Fuser | None:
    """The fuser installed in ``printer_id``, if any."""
    return next((f for f in fusers if f.printer_id == printer_id), None)


def find_printer(printers: Iterable[Printer], printer_id: str) -> Printer | None:
    return next((p for p in printers if p.id == printer_id), None)
