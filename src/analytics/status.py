"""
src/analytics/status.py
───────────────────────
Urgency classification and status display helpers.

classify_toner_status: OR of a time signal and a level signal,
evaluated critical → warning → normal, first match wins.
classify_fuser_status: level only.
"""
from __future__ import annotations

from config.consumables import (
    FUSER_THRESHOLDS,
    STATUS_CLASSES,
    STATUS_COLORS,
    STATUS_ORDER,
    TONER_THRESHOLDS,
    ConsumableStatus,
    FuserThresholds,
    TonerThresholds,
)
from src.i18n.translator import t


def classify_toner_status(
    days_until_change: int | None,
    level: float,
    thresholds: TonerThresholds = TONER_THRESHOLDS,
) -> ConsumableStatus:
    """
    Classify a toner reservoir.

    ``days_until_change=None`` means the reservoir is not being consumed;
    such a reservoir is always ``normal``.
    """
    if days_until_change is None:
        return ConsumableStatus.NORMAL
    if days_until_change <= thresholds.critical_days or level <= thresholds.critical_level:
        return ConsumableStatus.CRITICAL
    if days_until_change <= thresholds.warning_days or level <= thresholds.warning_level:
        return ConsumableStatus.WARNING
    return ConsumableStatus.NORMAL


def classify_fuser_status(
    level: float,
    thresholds: FuserThresholds = FUSER_THRESHOLDS,
) -> ConsumableStatus:
    if level <= thresholds.critical_level:
        return ConsumableStatus.CRITICAL
    if level <= thresholds.warning_level:
        return ConsumableStatus.WARNING
    return ConsumableStatus.NORMAL


# ── Display helpers ───────────────────────────────────────────────────────────


def status_text(status: str, lang: str | None = None) -> str:
    """critical → "Crítico", warning → "Advertencia", anything else → "Normal"."""
    return t(f"status.{_known(status)}", lang)


def fuser_status_text(status: str, lang: str | None = None) -> str:
    return t(f"fuser_status.{_known(status)}", lang)


def status_color(status: str) -> str:
    return STATUS_COLORS[_known(status)]


def status_class(status: str) -> str:
    return STATUS_CLASSES[_known(status)]


def status_rank(status: str) -> int:
    return STATUS_ORDER[_known(status)]


def _known(status: str) -> str:
    try:
        return ConsumableStatus(status).value
    except ValueError:
        return ConsumableStatus.NORMAL.value
