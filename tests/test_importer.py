"""
tests/test_importer.py
───────────────────────
Tests for the spreadsheet import pipeline.
"""
from datetime import timedelta

import pandas as pd
import pytest

from src.data.errors import ImportFormatError
from src.data.importer import import_printers, printers_from_frame
from src.data.models import PrinterStatus, PrinterType


def _sheet(now) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "Tipo": "MONOCROMÁTICA",
            "Marca": "hp",
            "Modelo": "M406",
            "Ubicación": "Piso 3",
            "Sede": "Sede Norte",
            "Serie": "SN1",
            "IP": "10.0.0.5",
            "Estado": "Operativa",
            "Nivel de Toner (%)": 40,
            "Capacidad del Toner": 1000,
            "Uso Diario": 10,
            "Modelo de Toner": "W9004mc",
            "Comentario": "revisar",
            "Última Actualización": now - timedelta(hours=48),
        },
        {
            "Tipo": "COLOR",
            "Marca": "lexmark",
            "Modelo": "CS735",
            "Serie": "SN2",
            "Estado": "Retirada",
        },
        {"Modelo": "MS821", "Serie": None},
    ])


class TestPrintersFromFrame:
    def test_maps_columns(self, now):
        mono, color = printers_from_frame(_sheet(now), now)
        assert mono.brand == "HP"
        assert mono.sede == "Sede Norte"
        assert mono.current_toner_level == 40.0
        assert mono.toner_capacity == 1000
        assert mono.comment == "REVISAR"
        assert mono.updated_at == now - timedelta(hours=48)
        assert color.type == PrinterType.COLOR
        assert color.status == PrinterStatus.RETIRED

    def test_defaults_for_missing_cells(self, now):
        _, color = printers_from_frame(_sheet(now), now)
        assert color.current_toner_level == 100.0
        assert color.toner_capacity == 3000
        assert color.daily_usage == 50
        assert color.sede == "Por definir"
        assert color.toner_model == "MULTI-COLOR"
        assert color.updated_at == now

    def test_skips_rows_without_serial(self, now):
        assert len(printers_from_frame(_sheet(now), now)) == 2

    def test_unparseable_number_uses_default(self, now):
        df = pd.DataFrame([{"Modelo": "M406", "Serie": "SN9", "Uso Diario": "mucho"}])
        [printer] = printers_from_frame(df, now)
        assert printer.daily_usage == 50

    def test_missing_required_column(self, now):
        with pytest.raises(ImportFormatError) as exc_info:
            printers_from_frame(pd.DataFrame([{"Modelo": "M406"}]), now)
        assert exc_info.value.details["missing"] == ["Serie"]


class TestImportPrinters:
    def test_catches_up_from_sheet_snapshot(self, now):
        mono, color = import_printers(_sheet(now), now)
        # 10 pages/day on a 1000-page toner for 48 h: 2 %
        assert mono.current_toner_level == 38.0
        assert mono.updated_at == now
        assert color.updated_at == now
