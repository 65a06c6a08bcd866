"""
tests/test_clock.py
────────────────────
Tests for the clock collaborator and elapsed-time helpers.
"""
from datetime import UTC, datetime, timedelta

from src.data.clock import FixedClock, SystemClock, days_between, ensure_aware, hours_between


class TestElapsed:
    def test_truncates_partial_hours(self, now):
        assert hours_between(now - timedelta(minutes=59), now) == 0
        assert hours_between(now - timedelta(minutes=61), now) == 1
        assert hours_between(now - timedelta(hours=72, minutes=30), now) == 72

    def test_days(self, now):
        assert days_between(now - timedelta(hours=47), now) == 1
        assert days_between(now - timedelta(hours=48), now) == 2

    def test_future_snapshot_is_negative(self, now):
        assert hours_between(now + timedelta(hours=2), now) == -2

    def test_naive_is_utc(self, now):
        naive = datetime(2024, 6, 1, 10, 0, 0)
        assert ensure_aware(naive).tzinfo is UTC
        assert hours_between(naive, now) == 2


class TestClocks:
    def test_fixed_clock_advances(self, now):
        clock = FixedClock(now)
        assert clock.now() == now
        assert clock.advance(hours=3) == now + timedelta(hours=3)
        assert clock.now() == now + timedelta(hours=3)

    def test_system_clock_is_aware(self):
        assert SystemClock().now().tzinfo is not None
