"""
src/data/errors.py
──────────────────
Exception hierarchy for the data layer.

    TonerTrackError (base)
    ├── ImportFormatError  - spreadsheet rows lack required columns
    └── PersistenceError   - a save to the store failed

Prediction functions raise none of these; they are total by contract.
"""
from __future__ import annotations

from typing import Any


class TonerTrackError(Exception):
    """Base exception carrying a message and optional debugging details."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ImportFormatError(TonerTrackError):
    """The imported sheet is missing columns the importer needs."""


class PersistenceError(TonerTrackError):
    """Writing an entity to the store failed."""
