"""
src/analytics/depletion.py
──────────────────────────
Toner depletion predictor.

Extrapolates a stored toner level forward from its last snapshot:

  hourly_rate = daily_usage / capacity × 100 / 24        (% of capacity per hour)
  adjusted    = max(0, level − hours_elapsed × hourly_rate)   when hours_elapsed ≥ 1
  pages_left  = ⌊adjusted / 100 × capacity⌋
  days_left   = ⌊pages_left / daily_usage⌋

Sub-hour gaps leave the level untouched. Multi-day gaps are handled in one
proportional step. A reservoir with zero daily usage never runs out:
days_left and the change date are None and the status is normal.

Pages, days and status come from the unrounded level; only the reported
adjusted_level is rounded to 2 places.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

import numpy as np

from config.consumables import CATCH_UP, ConsumableStatus, get_color_code, get_color_display_name
from src.analytics.status import classify_toner_status
from src.data.clock import days_between, ensure_aware, hours_between
from src.data.models import ColorToner, ColorTonerPrediction, TonerPrediction

# Absorbs float noise in level × capacity before flooring
_PAGE_EPS = 1e-9


@dataclass(frozen=True)
class _Projection:
    adjusted_level: float
    pages_remaining: int
    days_until_change: int | None
    estimated_change_date: datetime | None
    status: ConsumableStatus
    consumed_pct: float


def round_half_up(value: float) -> int:
    """Nearest integer with halves rounded up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def hourly_rate(daily_usage: float, capacity: float) -> float:
    """Percent of a reservoir's capacity consumed per hour."""
    if capacity <= 0 or daily_usage <= 0:
        return 0.0
    return daily_usage / capacity * 100.0 / 24.0


def _project(
    level: float,
    capacity: int,
    daily_usage: int,
    hours_elapsed: int,
    now: datetime,
) -> _Projection:
    level = float(np.clip(level, 0.0, 100.0))
    rate = hourly_rate(daily_usage, capacity)

    adjusted = level
    if hours_elapsed >= CATCH_UP.min_hours:
        adjusted = max(0.0, level - hours_elapsed * rate)

    pages = max(0, math.floor(adjusted * capacity / 100.0 + _PAGE_EPS))

    if daily_usage > 0:
        days: int | None = max(0, pages // daily_usage)
        change_date: datetime | None = now + timedelta(days=days)
    else:
        days = None
        change_date = None

    return _Projection(
        adjusted_level=round(adjusted, 2),
        pages_remaining=pages,
        days_until_change=days,
        estimated_change_date=change_date,
        status=classify_toner_status(days, adjusted),
        consumed_pct=round(max(0, hours_elapsed) * rate, 2),
    )


def predict_toner(
    current_level: float,
    capacity: int,
    daily_usage: int,
    last_update: datetime,
    now: datetime,
) -> TonerPrediction:
    """Predict the state of a monochrome toner as of ``now``."""
    now = ensure_aware(now)
    hours = hours_between(last_update, now)
    p = _project(current_level, capacity, daily_usage, hours, now)
    return TonerPrediction(
        adjusted_level=p.adjusted_level,
        pages_remaining=p.pages_remaining,
        days_until_change=p.days_until_change,
        estimated_change_date=p.estimated_change_date,
        status=p.status,
        hours_elapsed=hours,
        days_elapsed=days_between(last_update, now),
        estimated_consumption=p.consumed_pct,
    )


def predict_color_toner(
    toner: ColorToner,
    daily_usage: int,
    last_update: datetime,
    now: datetime,
) -> ColorTonerPrediction:
    """
    Same formula as predict_toner for one color reservoir.

    ``daily_usage`` is the printer's shared rate: every page draws on all
    reservoirs at once.
    """
    now = ensure_aware(now)
    hours = hours_between(last_update, now)
    p = _project(toner.current_level, toner.capacity, daily_usage, hours, now)
    return ColorTonerPrediction(
        toner_id=toner.id,
        color=toner.color,
        color_name=get_color_display_name(toner.color),
        color_code=get_color_code(toner.color),
        current_level=toner.current_level,
        adjusted_level=p.adjusted_level,
        pages_remaining=p.pages_remaining,
        days_until_change=p.days_until_change,
        estimated_change_date=p.estimated_change_date,
        status=p.status,
    )
