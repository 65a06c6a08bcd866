"""
tests/test_batch.py
────────────────────
Tests for the batch processor and fleet views.
"""
from datetime import timedelta

import pandas as pd

from src.analytics import batch
from src.analytics.batch import (
    process_all,
    process_fusers,
    process_imported_printers,
    predictions_frame,
    sort_by_urgency,
    summarize_fleet,
)
from src.data.models import Fuser, Printer


def _printer(pid: str, now, level: float, capacity: int, usage: int, hours: int) -> Printer:
    return Printer(
        id=pid,
        model="M406",
        serial=f"SN-{pid}",
        toner_capacity=capacity,
        daily_usage=usage,
        current_toner_level=level,
        updated_at=now - timedelta(hours=hours),
    )


class TestProcessAll:
    def test_counts_updated_and_critical(self, mono_printer, empty_color_printer, now):
        low = _printer("LOW", now, level=8.0, capacity=1000, usage=100, hours=0)
        result = process_all([mono_printer, low, empty_color_printer], now)
        assert result.updated_count == 1
        assert result.critical_count == 2
        assert result.failed_ids == []
        assert [p.id for p in result.updated_printers] == ["PRN-MONO", "LOW", "PRN-EMPTY"]
        assert result.updated_printers[0].current_toner_level == 85.0

    def test_classifies_the_updated_state(self, now):
        # 12 % → 10 % after 48 h: warning before the update, critical after
        p = _printer("EDGE", now, level=12.0, capacity=1000, usage=10, hours=48)
        result = process_all([p], now)
        assert result.updated_printers[0].current_toner_level == 10.0
        assert result.critical_count == 1

    def test_small_moves_are_not_counted(self, now):
        p = _printer("SLOW", now, level=60.0, capacity=100_000, usage=10, hours=2)
        result = process_all([p], now)
        assert result.updated_count == 0
        assert result.updated_printers[0].updated_at == now

    def test_color_moves_are_counted(self, color_printer, now):
        stale = color_printer.model_copy(update={"updated_at": now - timedelta(hours=48)})
        assert process_all([stale], now).updated_count == 1

    def test_one_bad_printer_does_not_abort(self, mono_printer, now, monkeypatch):
        real = batch.maybe_update_printer

        def flaky(printer, at):
            if printer.id == "BAD":
                raise ZeroDivisionError("capacity")
            return real(printer, at)

        monkeypatch.setattr(batch, "maybe_update_printer", flaky)
        bad = _printer("BAD", now, level=50.0, capacity=1000, usage=10, hours=5)
        result = process_all([bad, mono_printer], now)
        assert result.failed_ids == ["BAD"]
        assert result.updated_printers[0] is bad
        assert result.updated_printers[1].current_toner_level == 85.0
        assert result.updated_count == 1

    def test_empty_batch(self, now):
        result = process_all([], now)
        assert result.updated_printers == []
        assert result.updated_count == result.critical_count == 0

    def test_import_path_uses_catch_up(self, mono_printer, now):
        [imported] = process_imported_printers([mono_printer], now)
        assert imported.current_toner_level == 85.0


class TestProcessFusers:
    def test_updates_and_counts(self, mono_printer, fuser, now):
        worn = Fuser(id="WORN", printer_id="LOW", lifespan=1000, pages_used=880.0, last_update=now)
        low = _printer("LOW", now, level=50.0, capacity=1000, usage=10, hours=0)
        result = process_fusers([mono_printer, low], [fuser, worn], now)
        assert result.updated_count == 1
        assert result.updated_fusers[0].pages_used == 1200.0
        assert result.warning_count == 1
        assert result.critical_count == 0

    def test_orphan_passes_through(self, fuser, now):
        result = process_fusers([], [fuser], now)
        assert result.updated_fusers == [fuser]
        assert result.updated_count == 0


class TestFleetViews:
    def test_summarize_fleet(self, mono_printer, color_printer, empty_color_printer, fuser, now):
        summary = summarize_fleet([mono_printer, color_printer, empty_color_printer], [fuser], now)
        assert summary.total == 3
        assert summary.critical == 2
        assert summary.normal == 1
        assert summary.stale == 1  # mono printer untouched for 72 h
        assert summary.critical_fusers == 0

    def test_sort_by_urgency(self, mono_printer, color_printer, now):
        warn = _printer("WARN", now, level=50.0, capacity=1000, usage=100, hours=0)
        ordered = sort_by_urgency([mono_printer, warn, color_printer], now)
        assert [p.id for p in ordered] == ["PRN-COLOR", "WARN", "PRN-MONO"]

    def test_predictions_frame(self, mono_printer, color_printer, now):
        df = predictions_frame([mono_printer, color_printer], now)
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 2
        assert {"printer_id", "level", "days_until_change", "status"} <= set(df.columns)
        assert df.loc[df["printer_id"] == "PRN-MONO", "level"].iloc[0] == 85.0
        assert df.loc[df["printer_id"] == "PRN-COLOR", "status"].iloc[0] == "critical"
