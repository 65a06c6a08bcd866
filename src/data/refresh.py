"""
src/data/refresh.py
───────────────────
One catch-up cycle over the stored fleet.

Loads printers and fusers, runs the batch processors, and saves every
entity the catch-up changed. Saves are fire-and-forget: a failed save is
logged and the cycle continues.
"""
from __future__ import annotations

import logging
from datetime import datetime

from src.analytics.batch import process_all, process_fusers, summarize_fleet
from src.data import store
from src.data.models import BatchResult, FleetSummary, FuserBatchResult

logger = logging.getLogger(__name__)


def refresh_fleet(now: datetime, stale_hours: int = 24) -> tuple[BatchResult, FuserBatchResult, FleetSummary]:
    printers = store.get_printers()
    fusers = store.get_fusers()

    printer_batch = process_all(printers, now)
    for before, after in zip(printers, printer_batch.updated_printers, strict=True):
        if after is not before:
            store.save_quietly("printers", after)

    fuser_batch = process_fusers(printer_batch.updated_printers, fusers, now)
    for before, after in zip(fusers, fuser_batch.updated_fusers, strict=True):
        if after is not before:
            store.save_quietly("fusers", after)

    summary = summarize_fleet(printer_batch.updated_printers, fuser_batch.updated_fusers, now, stale_hours)
    logger.info(
        "Fleet: %d printers, %d critical, %d warning · fusers: %d critical, %d warning",
        summary.total, summary.critical, summary.warning,
        summary.critical_fusers, summary.warning_fusers,
    )
    return printer_batch, fuser_batch, summary
