"""
src/analytics/batch.py
──────────────────────
Batch catch-up over a fleet, plus fleet-level summaries for the dashboard
and importer.

Ordering per printer: update first, then classify the updated state, so the
critical count always reflects the latest levels.

Each item is processed in isolation: a printer whose numbers cannot be
computed is logged, kept as it was, and listed in ``failed_ids``; the rest
of the batch carries on.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime

import pandas as pd
from pydantic import ValidationError

from config.consumables import CATCH_UP, ConsumableStatus
from src.analytics.catch_up import maybe_update_fuser, maybe_update_printer
from src.analytics.fuser import find_printer, predict_printer_fuser
from src.analytics.prediction import display_level, predict_printer
from src.analytics.status import status_rank
from src.data.clock import ensure_aware
from src.data.models import (
    BatchResult,
    FleetSummary,
    Fuser,
    FuserBatchResult,
    Printer,
    PrinterType,
)

logger = logging.getLogger(__name__)

_ITEM_ERRORS = (ArithmeticError, ValueError, ValidationError)


def _levels(printer: Printer) -> list[float]:
    if printer.type == PrinterType.COLOR:
        return [t.current_level for t in printer.color_toners]
    return [printer.current_toner_level]


def _level_moved(before: Printer, after: Printer) -> bool:
    """True when any level moved by more than the tolerance."""
    return any(
        abs(a - b) > CATCH_UP.level_tolerance_pct
        for a, b in zip(_levels(before), _levels(after), strict=False)
    )


def process_all(printers: Iterable[Printer], now: datetime) -> BatchResult:
    """Catch up every printer and count the updated and critical ones."""
    now = ensure_aware(now)
    updated_printers: list[Printer] = []
    updated_count = 0
    critical_count = 0
    failed: list[str] = []

    for printer in printers:
        try:
            updated = maybe_update_printer(printer, now)
            prediction = predict_printer(updated, now)
        except _ITEM_ERRORS:
            logger.exception("Catch-up failed for printer %s; keeping stored state", printer.id)
            updated_printers.append(printer)
            failed.append(printer.id)
            continue

        if _level_moved(printer, updated):
            updated_count += 1
        if prediction.status == ConsumableStatus.CRITICAL:
            critical_count += 1
        updated_printers.append(updated)

    if updated_count or failed:
        logger.info(
            "Catch-up: %d printer(s) updated, %d critical, %d failed",
            updated_count, critical_count, len(failed),
        )
    return BatchResult(
        updated_printers=updated_printers,
        updated_count=updated_count,
        critical_count=critical_count,
        failed_ids=failed,
    )


def process_fusers(
    printers: Sequence[Printer],
    fusers: Iterable[Fuser],
    now: datetime,
) -> FuserBatchResult:
    """
    Catch up every fuser against its printer. Fusers whose printer is not
    in ``printers`` pass through unchanged and are not classified.
    """
    now = ensure_aware(now)
    by_id = {p.id: p for p in printers}
    result: list[Fuser] = []
    updated_count = critical_count = warning_count = 0
    failed: list[str] = []

    for fuser in fusers:
        printer = by_id.get(fuser.printer_id)
        if printer is None:
            result.append(fuser)
            continue
        try:
            updated = maybe_update_fuser(printer, fuser, now)
            status = predict_printer_fuser(printer, updated, now).status
        except _ITEM_ERRORS:
            logger.exception("Catch-up failed for fuser %s; keeping stored state", fuser.id)
            result.append(fuser)
            failed.append(fuser.id)
            continue

        if abs(updated.pages_used - fuser.pages_used) > CATCH_UP.pages_tolerance:
            updated_count += 1
        if status == ConsumableStatus.CRITICAL:
            critical_count += 1
        elif status == ConsumableStatus.WARNING:
            warning_count += 1
        result.append(updated)

    return FuserBatchResult(
        updated_fusers=result,
        updated_count=updated_count,
        critical_count=critical_count,
        warning_count=warning_count,
        failed_ids=failed,
    )


def process_imported_printers(printers: Iterable[Printer], now: datetime) -> list[Printer]:
    """Normalize freshly imported printers to "as of now" before first save."""
    return process_all(printers, now).updated_printers


# ── Fleet views ───────────────────────────────────────────────────────────────


def summarize_fleet(
    printers: Sequence[Printer],
    fusers: Iterable[Fuser],
    now: datetime,
    stale_hours: int = 24,
) -> FleetSummary:
    """Status counts across the fleet; stale = monochrome printers not caught up for ``stale_hours``."""
    summary = FleetSummary(total=len(printers))
    for printer in printers:
        try:
            prediction = predict_printer(printer, now)
        except _ITEM_ERRORS:
            logger.exception("Prediction failed for printer %s", printer.id)
            continue
        if prediction.status == ConsumableStatus.CRITICAL:
            summary.critical += 1
        elif prediction.status == ConsumableStatus.WARNING:
            summary.warning += 1
        else:
            summary.normal += 1
        if printer.type == PrinterType.MONOCHROME and prediction.hours_elapsed >= stale_hours:
            summary.stale += 1

    for fuser in fusers:
        printer = find_printer(printers, fuser.printer_id)
        if printer is None:
            continue
        status = predict_printer_fuser(printer, fuser, now).status
        if status == ConsumableStatus.CRITICAL:
            summary.critical_fusers += 1
        elif status == ConsumableStatus.WARNING:
            summary.warning_fusers += 1
    return summary


def _urgency_key(printer: Printer, now: datetime) -> tuple[int, float]:
    prediction = predict_printer(printer, now)
    days = prediction.days_until_change
    return (-status_rank(prediction.status), float("inf") if days is None else float(days))


def sort_by_urgency(printers: Iterable[Printer], now: datetime) -> list[Printer]:
    """Most urgent first: by status, then by fewest days left (stable)."""
    return sorted(printers, key=lambda p: _urgency_key(p, now))


def predictions_frame(printers: Iterable[Printer], now: datetime) -> pd.DataFrame:
    """One row per printer with its current prediction, for reports."""
    rows = []
    for printer in printers:
        prediction = predict_printer(printer, now)
        rows.append({
            "printer_id": printer.id,
            "model": printer.model,
            "location": printer.location,
            "sede": printer.sede,
            "type": printer.type.value,
            "level": display_level(prediction),
            "pages_remaining": prediction.pages_remaining,
            "days_until_change": prediction.days_until_change,
            "estimated_change_date": prediction.estimated_change_date,
            "status": prediction.status.value,
            "hours_elapsed": prediction.hours_elapsed,
        })
    return pd.DataFrame(rows)
