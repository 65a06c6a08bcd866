"""
src/data/store.py
─────────────────
SQLite persistence collaborator.

Provides:
  - initialize_db()          : Create tables + seed a demo fleet on first run
  - save(collection, entity) : Upsert a Printer ("printers") or Fuser ("fusers")
  - save_quietly(...)        : Same, but logs failures instead of raising
  - get_printers()           : All printers
  - get_fusers()             : All fusers
  - get_fuser_for_printer()  : The fuser installed in a printer, if any

The prediction engine never calls this module; the host persists whatever
the catch-up returned. Color toners are stored as a JSON column on their
printer.

Thread safety: uses check_same_thread=False + a module-level lock.
"""
from __future__ import annotations

import json
import logging
import sqlite3
import threading

from config.settings import settings
from src.data.errors import PersistenceError
from src.data.models import Fuser, Printer

logger = logging.getLogger(__name__)

_lock = threading.RLock()
_DB: sqlite3.Connection | None = None

COLLECTIONS = ("printers", "fusers")


# ── Connection ────────────────────────────────────────────────────────────────

def _get_conn() -> sqlite3.Connection:
    global _DB
    if _DB is None:
        _DB = sqlite3.connect(settings.DATABASE_URL, check_same_thread=False)
        _DB.row_factory = sqlite3.Row
    return _DB


def close() -> None:
    """Close the shared connection; the next call reopens it."""
    global _DB
    with _lock:
        if _DB is not None:
            _DB.close()
            _DB = None


# ── Schema ────────────────────────────────────────────────────────────────────

_CREATE_PRINTERS = """
CREATE TABLE IF NOT EXISTS printers (
    id                   TEXT PRIMARY KEY,
    brand                TEXT NOT NULL DEFAULT '',
    model                TEXT NOT NULL DEFAULT '',
    location             TEXT NOT NULL DEFAULT '',
    sede                 TEXT NOT NULL DEFAULT '',
    serial               TEXT NOT NULL DEFAULT '',
    ip                   TEXT NOT NULL DEFAULT '',
    type                 TEXT NOT NULL,
    status               TEXT NOT NULL,
    daily_usage          INTEGER NOT NULL,
    toner_model          TEXT NOT NULL DEFAULT '',
    toner_capacity       INTEGER NOT NULL,
    current_toner_level  REAL NOT NULL,
    color_toners         TEXT NOT NULL DEFAULT '[]',
    comment              TEXT NOT NULL DEFAULT '',
    created_at           TEXT NOT NULL,
    updated_at           TEXT NOT NULL
);
"""

_CREATE_FUSERS = """
CREATE TABLE IF NOT EXISTS fusers (
    id                 TEXT PRIMARY KEY,
    printer_id         TEXT NOT NULL UNIQUE,
    fuser_model        TEXT NOT NULL DEFAULT '',
    lifespan           INTEGER NOT NULL,
    pages_used         REAL NOT NULL,
    installation_date  TEXT NOT NULL,
    last_update        TEXT NOT NULL,
    updated_at         TEXT NOT NULL
);
"""

_CREATE_IDX = """
CREATE INDEX IF NOT EXISTS idx_printers_sede ON printers (sede);
"""


def _create_tables(conn: sqlite3.Connection) -> None:
    with conn:
        conn.executescript(_CREATE_PRINTERS + _CREATE_FUSERS + _CREATE_IDX)


# ── Row mapping ───────────────────────────────────────────────────────────────

def _printer_row(p: Printer) -> tuple:
    return (
        p.id, p.brand, p.model, p.location, p.sede, p.serial, p.ip,
        p.type.value, p.status.value, p.daily_usage, p.toner_model,
        p.toner_capacity, p.current_toner_level,
        json.dumps([t.model_dump(mode="json") for t in p.color_toners]),
        p.comment, p.created_at.isoformat(), p.updated_at.isoformat(),
    )


def _fuser_row(f: Fuser) -> tuple:
    return (
        f.id, f.printer_id, f.fuser_model, f.lifespan, f.pages_used,
        f.installation_date.isoformat(), f.last_update.isoformat(), f.updated_at.isoformat(),
    )


def _to_printer(row: sqlite3.Row) -> Printer:
    data = dict(row)
    data["color_toners"] = json.loads(data["color_toners"] or "[]")
    return Printer.model_validate(data)


def _to_fuser(row: sqlite3.Row) -> Fuser:
    return Fuser.model_validate(dict(row))


_UPSERT_PRINTER = """INSERT OR REPLACE INTO printers
   (id, brand, model, location, sede, serial, ip, type, status, daily_usage,
    toner_model, toner_capacity, current_toner_level, color_toners, comment,
    created_at, updated_at)
   VALUES (?,?,?,?,?,?,?,?,?,?,?,?,?,?,?,?,?)"""

_UPSERT_FUSER = """INSERT OR REPLACE INTO fusers
   (id, printer_id, fuser_model, lifespan, pages_used,
    installation_date, last_update, updated_at)
   VALUES (?,?,?,?,?,?,?,?)"""


# ── Public API ────────────────────────────────────────────────────────────────

def init_schema() -> None:
    """Create tables without seeding."""
    _create_tables(_get_conn())


def initialize_db(force_reseed: bool = False) -> None:
    """
    Create tables and populate with a demo fleet if the store is empty.
    Safe to call multiple times (idempotent).
    """
    # Import here to avoid loading numpy for plain store use
    from src.data.simulator import generate_fleet

    conn = _get_conn()
    _create_tables(conn)

    with _lock:
        count = conn.execute("SELECT COUNT(*) FROM printers").fetchone()[0]
        if count > 0 and not force_reseed:
            return  # Already seeded

        with conn:
            conn.execute("DELETE FROM printers")
            conn.execute("DELETE FROM fusers")

        printers, fusers = generate_fleet()
        insert_printers(printers)
        insert_fusers(fusers)
        logger.info("Seeded store with %d printers and %d fusers", len(printers), len(fusers))


def insert_printers(printers: list[Printer]) -> None:
    if not printers:
        return
    conn = _get_conn()
    with _lock, conn:
        conn.executemany(_UPSERT_PRINTER, [_printer_row(p) for p in printers])


def insert_fusers(fusers: list[Fuser]) -> None:
    if not fusers:
        return
    conn = _get_conn()
    with _lock, conn:
        conn.executemany(_UPSERT_FUSER, [_fuser_row(f) for f in fusers])


def save(collection: str, entity: Printer | Fuser) -> None:
    """
    Upsert one entity into ``collection`` ("printers" or "fusers").

    Raises PersistenceError when the write fails.
    """
    if collection not in COLLECTIONS:
        raise PersistenceError(f"Unknown collection: {collection}", {"collection": collection})
    try:
        if collection == "printers":
            insert_printers([entity])
        else:
            insert_fusers([entity])
    except sqlite3.Error as exc:
        raise PersistenceError(
            f"Could not save {collection} record",
            {"collection": collection, "id": entity.id, "error": str(exc)},
        ) from exc


def save_quietly(collection: str, entity: Printer | Fuser) -> bool:
    """Fire-and-forget save: failures are logged, never raised."""
    try:
        save(collection, entity)
    except PersistenceError:
        logger.exception("Save failed for %s/%s", collection, entity.id)
        return False
    return True


def get_printers(sede: str | None = None) -> list[Printer]:
    conn = _get_conn()
    sql = "SELECT * FROM printers"
    params: list = []
    if sede:
        sql += " WHERE sede = ?"
        params.append(sede)
    sql += " ORDER BY id"
    with _lock:
        rows = conn.execute(sql, params).fetchall()
    return [_to_printer(r) for r in rows]


def get_printer(printer_id: str) -> Printer | None:
    conn = _get_conn()
    with _lock:
        row = conn.execute("SELECT * FROM printers WHERE id = ?", (printer_id,)).fetchone()
    return _to_printer(row) if row else None


def get_fusers() -> list[Fuser]:
    conn = _get_conn()
    with _lock:
        rows = conn.execute("SELECT * FROM fusers ORDER BY id").fetchall()
    return [_to_fuser(r) for r in rows]


def get_fuser_for_printer(printer_id: str) -> Fuser | None:
    """The fuser installed in ``printer_id`` (1:1 by foreign key)."""
    conn = _get_conn()
    with _lock:
        row = conn.execute("SELECT * FROM fusers WHERE printer_id = ?", (printer_id,)).fetchone()
    return _to_fuser(row) if row else None
