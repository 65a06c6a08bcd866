"""
src/analytics/color.py
──────────────────────
Color printer aggregation.

A color printer is as urgent as its emptiest reservoir: the printer-level
days / pages / change date / status are copied from the critical color,
the reservoir with the fewest days left.
"""
from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

import numpy as np

from config.consumables import ConsumableStatus
from src.analytics.depletion import predict_color_toner, round_half_up
from src.data.clock import ensure_aware, hours_between
from src.data.models import ColorPrinterPrediction, ColorTonerPrediction, Printer


def _days_key(prediction: ColorTonerPrediction) -> float:
    days = prediction.days_until_change
    return float("inf") if days is None else float(days)


def pick_critical(predictions: Sequence[ColorTonerPrediction]) -> ColorTonerPrediction | None:
    """
    Minimum by days_until_change; on ties the earliest entry wins.
    Non-consuming reservoirs (None days) rank after every finite value.
    """
    critical: ColorTonerPrediction | None = None
    for prediction in predictions:
        if critical is None or _days_key(prediction) < _days_key(critical):
            critical = prediction
    return critical


def average_level(predictions: Sequence[ColorTonerPrediction]) -> int:
    if not predictions:
        return 0
    return round_half_up(float(np.mean([p.adjusted_level for p in predictions])))


def predict_color(printer: Printer, now: datetime) -> ColorPrinterPrediction:
    """Printer-level prediction for a color printer."""
    now = ensure_aware(now)
    hours = hours_between(printer.updated_at, now)

    if not printer.color_toners:
        # Unconfigured color printer: surface it as critical
        return ColorPrinterPrediction(
            days_until_change=0,
            pages_remaining=0,
            estimated_change_date=now,
            status=ConsumableStatus.CRITICAL,
            average_level=0,
            hours_elapsed=hours,
        )

    usage = printer.effective_daily_usage
    predictions = [
        predict_color_toner(toner, usage, printer.updated_at, now)
        for toner in printer.color_toners
    ]
    critical = pick_critical(predictions)

    return ColorPrinterPrediction(
        days_until_change=critical.days_until_change,
        pages_remaining=critical.pages_remaining,
        estimated_change_date=critical.estimated_change_date,
        status=critical.status,
        color_predictions=predictions,
        critical_color=critical,
        average_level=average_level(predictions),
        hours_elapsed=hours,
    )
