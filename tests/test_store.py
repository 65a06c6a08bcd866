"""
tests/test_store.py
────────────────────
Tests for the SQLite store (in-memory).
"""
import pytest

from src.data.errors import PersistenceError


class TestSaveAndLoad:
    def test_printer_round_trip(self, fresh_store, mono_printer):
        fresh_store.save("printers", mono_printer)
        loaded = fresh_store.get_printer("PRN-MONO")
        assert loaded == mono_printer

    def test_color_toners_survive(self, fresh_store, color_printer):
        fresh_store.save("printers", color_printer)
        loaded = fresh_store.get_printer("PRN-COLOR")
        assert [t.current_level for t in loaded.color_toners] == [80.0, 5.0, 50.0]
        assert loaded.color_toners[1].id == "tm"

    def test_save_replaces(self, fresh_store, mono_printer):
        fresh_store.save("printers", mono_printer)
        fresh_store.save("printers", mono_printer.model_copy(update={"current_toner_level": 42.0}))
        assert len(fresh_store.get_printers()) == 1
        assert fresh_store.get_printer("PRN-MONO").current_toner_level == 42.0

    def test_filter_by_sede(self, fresh_store, mono_printer, color_printer):
        fresh_store.insert_printers([mono_printer, color_printer])
        assert [p.id for p in fresh_store.get_printers(sede="Sede Central")] == ["PRN-MONO"]
        assert len(fresh_store.get_printers()) == 2

    def test_fuser_lookup(self, fresh_store, fuser):
        fresh_store.save("fusers", fuser)
        assert fresh_store.get_fuser_for_printer("PRN-MONO") == fuser
        assert fresh_store.get_fuser_for_printer("NOPE") is None
        assert fresh_store.get_fusers() == [fuser]

    def test_missing_printer(self, fresh_store):
        assert fresh_store.get_printer("NOPE") is None


class TestErrors:
    def test_unknown_collection_raises(self, fresh_store, mono_printer):
        with pytest.raises(PersistenceError) as exc_info:
            fresh_store.save("toners", mono_printer)
        assert exc_info.value.details == {"collection": "toners"}

    def test_save_quietly_reports_failure(self, fresh_store, mono_printer):
        assert fresh_store.save_quietly("toners", mono_printer) is False
        assert fresh_store.save_quietly("printers", mono_printer) is True


class TestInitializeDb:
    def test_seeds_demo_fleet_once(self, fresh_store):
        fresh_store.initialize_db()
        printers = fresh_store.get_printers()
        assert len(printers) == 6
        assert len(fresh_store.get_fusers()) == 6

        fresh_store.initialize_db()
        assert len(fresh_store.get_printers()) == 6

    def test_does_not_overwrite_existing(self, fresh_store, mono_printer):
        fresh_store.save("printers", mono_printer)
        fresh_store.initialize_db()
        assert [p.id for p in fresh_store.get_printers()] == ["PRN-MONO"]
