"""
src/data/importer.py
────────────────────
Import pipeline collaborator: spreadsheet rows → Printer records.

Works on an already-parsed sheet (a pandas DataFrame with the Spanish
column headers used by the printer export). Reading the file is the
caller's concern.

Defaults for missing cells: level 100 %, capacity 3000 pages,
daily usage 50 pages, sede "Por definir". Rows without a model or a
serial are skipped. An optional "Última Actualización" column sets the
snapshot time so the first catch-up accounts for the time since then.
"""
from __future__ import annotations

import logging
from datetime import datetime

import pandas as pd

from src.analytics.batch import process_imported_printers
from src.data.clock import ensure_aware
from src.data.errors import ImportFormatError
from src.data.models import Printer, PrinterStatus, PrinterType

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("Modelo", "Serie")

DEFAULT_LEVEL = 100
DEFAULT_CAPACITY = 3000
DEFAULT_DAILY_USAGE = 50
DEFAULT_SEDE = "Por definir"
DEFAULT_MONO_TONER = "W9004mc"

STATUS_WORDS: dict[str, PrinterStatus] = {
    "operativa": PrinterStatus.OPERATIONAL,
    "instalada": PrinterStatus.OPERATIONAL,
    "disponible": PrinterStatus.AVAILABLE,
    "backup": PrinterStatus.BACKUP,
    "retirada": PrinterStatus.RETIRED,
}


def _text(row: pd.Series, column: str, default: str = "") -> str:
    value = row.get(column)
    if value is None or pd.isna(value):
        return default
    return str(value).strip() or default


def _int(row: pd.Series, column: str, default: int) -> int:
    value = row.get(column)
    if value is None or pd.isna(value):
        return default
    value = pd.to_numeric(value, errors="coerce")
    if pd.isna(value):
        return default
    return int(value)


def _status(row: pd.Series) -> PrinterStatus:
    word = _text(row, "Estado", "operativa").lower()
    status = STATUS_WORDS.get(word)
    if status is None:
        try:
            status = PrinterStatus(word)
        except ValueError:
            logger.warning("Unknown printer status %r; importing as operational", word)
            status = PrinterStatus.OPERATIONAL
    return status


def _snapshot(row: pd.Series, now: datetime) -> datetime:
    value = row.get("Última Actualización")
    if value is None or pd.isna(value):
        return now
    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        return now
    return ensure_aware(ts.to_pydatetime())


def row_to_printer(row: pd.Series, now: datetime) -> Printer:
    is_color = _text(row, "Tipo").upper() == "COLOR"
    snapshot = _snapshot(row, now)
    return Printer(
        type=PrinterType.COLOR if is_color else PrinterType.MONOCHROME,
        brand=_text(row, "Marca").upper(),
        model=_text(row, "Modelo"),
        location=_text(row, "Ubicación"),
        sede=_text(row, "Sede", DEFAULT_SEDE),
        serial=_text(row, "Serie"),
        ip=_text(row, "IP"),
        status=_status(row),
        current_toner_level=_int(row, "Nivel de Toner (%)", DEFAULT_LEVEL),
        toner_capacity=max(1, _int(row, "Capacidad del Toner", DEFAULT_CAPACITY)),
        daily_usage=max(0, _int(row, "Uso Diario", DEFAULT_DAILY_USAGE)),
        toner_model=_text(row, "Modelo de Toner", "MULTI-COLOR" if is_color else DEFAULT_MONO_TONER),
        comment=_text(row, "Comentario").upper(),
        created_at=now,
        updated_at=snapshot,
    )


def printers_from_frame(df: pd.DataFrame, now: datetime) -> list[Printer]:
    """
    Map sheet rows to printers.

    Raises ImportFormatError when a required column is absent.
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ImportFormatError("Sheet is missing required columns", {"missing": missing})

    now = ensure_aware(now)
    printers: list[Printer] = []
    for index, row in df.iterrows():
        if not _text(row, "Modelo") or not _text(row, "Serie"):
            logger.warning("Skipping row %s: model and serial are required", index)
            continue
        printers.append(row_to_printer(row, now))
    return printers


def import_printers(df: pd.DataFrame, now: datetime) -> list[Printer]:
    """Parse the sheet and bring every printer up to date before its first save."""
    printers = process_imported_printers(printers_from_frame(df, now), now)
    logger.info("Imported %d printer(s) from %d row(s)", len(printers), len(df))
    return printers
