"""
src/data/clock.py
─────────────────
Clock collaborator and elapsed-time helpers.

Prediction functions never read the wall clock; the host passes ``now``
from a Clock. Tests use FixedClock.

Elapsed units are whole hours / whole days truncated toward zero, so a
snapshot taken 59 minutes ago has 0 elapsed hours.
"""
from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(tz=UTC)


class FixedClock:
    """Deterministic clock for tests and replays."""

    def __init__(self, at: datetime):
        self._at = ensure_aware(at)

    def now(self) -> datetime:
        return self._at

    def advance(self, **delta) -> datetime:
        """Move forward by ``timedelta(**delta)`` and return the new instant."""
        self._at = self._at + timedelta(**delta)
        return self._at


def ensure_aware(ts: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    return ts if ts.tzinfo is not None else ts.replace(tzinfo=UTC)


def _elapsed_seconds(start: datetime, end: datetime) -> float:
    return (ensure_aware(end) - ensure_aware(start)).total_seconds()


def hours_between(start: datetime, end: datetime) -> int:
    return math.trunc(_elapsed_seconds(start, end) / 3600)


def days_between(start: datetime, end: datetime) -> int:
    return math.trunc(_elapsed_seconds(start, end) / 86400)
