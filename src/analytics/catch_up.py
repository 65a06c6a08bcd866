"""
src/analytics/catch_up.py
─────────────────────────
Auto-update (catch-up) mutator.

Advances a stored toner level or fuser usage to "as of now" and moves the
entity's baseline timestamp to ``now``. Calling again within the same hour
finds fewer than one elapsed hour and is a no-op, so repeated invocation
never compounds depletion.

Gates:
  monochrome printer : hours_elapsed ≥ 1
  color printer      : hours_elapsed ≥ 1, all reservoirs updated in one pass
  fuser              : hours_elapsed ≥ 1 and estimated_usage > 0

The functions return the same object when nothing is warranted and a new
model otherwise. No I/O: persisting the result is the caller's job.
"""
from __future__ import annotations

from datetime import datetime

from config.consumables import CATCH_UP
from src.analytics.depletion import predict_color_toner, predict_toner
from src.analytics.fuser import predict_printer_fuser
from src.data.clock import ensure_aware, hours_between
from src.data.models import Fuser, Printer, PrinterType


def maybe_update_printer(printer: Printer, now: datetime) -> Printer:
    now = ensure_aware(now)
    if printer.type == PrinterType.COLOR:
        return _update_color(printer, now)

    prediction = predict_toner(
        printer.current_toner_level,
        printer.toner_capacity,
        printer.effective_daily_usage,
        printer.updated_at,
        now,
    )
    if prediction.hours_elapsed < CATCH_UP.min_hours:
        return printer
    return printer.model_copy(
        update={"current_toner_level": prediction.adjusted_level, "updated_at": now}
    )


def _update_color(printer: Printer, now: datetime) -> Printer:
    if hours_between(printer.updated_at, now) < CATCH_UP.min_hours:
        return printer

    usage = printer.effective_daily_usage
    toners = [
        toner.model_copy(
            update={
                "current_level": predict_color_toner(toner, usage, printer.updated_at, now).adjusted_level
            }
        )
        for toner in printer.color_toners
    ]
    return printer.model_copy(update={"color_toners": toners, "updated_at": now})


def maybe_update_fuser(printer: Printer, fuser: Fuser, now: datetime) -> Fuser:
    now = ensure_aware(now)
    prediction = predict_printer_fuser(printer, fuser, now)
    if prediction.hours_elapsed < CATCH_UP.min_hours or prediction.estimated_usage <= 0:
        return fuser
    return fuser.model_copy(
        update={"pages_used": float(prediction.pages_used), "last_update": now, "updated_at": now}
    )


def catch_up(
    entity: Printer | Fuser,
    now: datetime,
    printer: Printer | None = None,
) -> tuple[Printer | Fuser, bool]:
    """
    Apply the matching mutator and report whether anything changed.

    A Fuser needs its ``printer`` to know the usage rate; without one it is
    returned unchanged.
    """
    if isinstance(entity, Fuser):
        if printer is None:
            return entity, False
        updated = maybe_update_fuser(printer, entity, now)
    else:
        updated = maybe_update_printer(entity, now)
    return updated, updated is not entity
