"""
src/data/models.py
──────────────────
Pydantic v2 data models for printers, consumables, and derived predictions.

Entities (persisted): Printer, ColorToner, Fuser.
Predictions (derived, recomputed on demand, never stored):
  TonerPrediction / ColorPrinterPrediction  (tagged on ``kind``)
  ColorTonerPrediction, FuserPrediction
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Annotated, Literal
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from config.consumables import ConsumableStatus, TonerColor


class PrinterType(str, Enum):
    MONOCHROME = "monochrome"
    COLOR = "color"


class PrinterStatus(str, Enum):
    OPERATIONAL = "operational"
    AVAILABLE = "available"
    BACKUP = "backup"
    RETIRED = "retired"


def _new_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


def _clamp_level(value: float) -> float:
    return min(100.0, max(0.0, float(value)))


# ── Entities ──────────────────────────────────────────────────────────────────


class ColorToner(BaseModel):
    id: str = Field(default_factory=_new_id)
    color: TonerColor
    model: str = ""
    capacity: int = Field(gt=0)
    current_level: float = Field(default=100.0, ge=0.0, le=100.0)

    @field_validator("current_level", mode="before")
    @classmethod
    def _clamp(cls, v):
        return _clamp_level(v)


class Printer(BaseModel):
    id: str = Field(default_factory=_new_id)
    brand: str = ""
    model: str = ""
    location: str = ""
    sede: str = ""
    serial: str = ""
    ip: str = ""
    type: PrinterType = PrinterType.MONOCHROME
    status: PrinterStatus = PrinterStatus.OPERATIONAL
    daily_usage: int = Field(default=0, ge=0)
    toner_model: str = ""
    toner_capacity: int = Field(default=3000, gt=0)
    current_toner_level: float = Field(default=100.0, ge=0.0, le=100.0)
    color_toners: list[ColorToner] = Field(default_factory=list)
    comment: str = ""
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @field_validator("current_toner_level", mode="before")
    @classmethod
    def _clamp(cls, v):
        return _clamp_level(v)

    @property
    def effective_daily_usage(self) -> int:
        """Pages/day actually drawn from the consumables (0 unless operational)."""
        return self.daily_usage if self.status == PrinterStatus.OPERATIONAL else 0


class Fuser(BaseModel):
    id: str = Field(default_factory=_new_id)
    printer_id: str
    fuser_model: str = ""
    lifespan: int = Field(gt=0)
    pages_used: float = Field(default=0.0, ge=0.0)
    installation_date: datetime = Field(default_factory=_utcnow)
    last_update: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


# ── Predictions ───────────────────────────────────────────────────────────────


class TonerPrediction(BaseModel):
    kind: Literal["mono"] = "mono"
    adjusted_level: float = Field(ge=0.0, le=100.0)
    pages_remaining: int = Field(ge=0)
    days_until_change: int | None = Field(default=None, ge=0)  # None → never
    estimated_change_date: datetime | None = None
    status: ConsumableStatus
    hours_elapsed: int = 0
    days_elapsed: int = 0
    estimated_consumption: float = 0.0


class ColorTonerPrediction(BaseModel):
    toner_id: str
    color: TonerColor
    color_name: str
    color_code: str
    current_level: float
    adjusted_level: float = Field(ge=0.0, le=100.0)
    pages_remaining: int = Field(ge=0)
    days_until_change: int | None = Field(default=None, ge=0)
    estimated_change_date: datetime | None = None
    status: ConsumableStatus


class ColorPrinterPrediction(BaseModel):
    kind: Literal["color"] = "color"
    days_until_change: int | None = Field(default=None, ge=0)
    pages_remaining: int = Field(ge=0)
    estimated_change_date: datetime | None = None
    status: ConsumableStatus
    color_predictions: list[ColorTonerPrediction] = Field(default_factory=list)
    critical_color: ColorTonerPrediction | None = None
    average_level: int = Field(ge=0, le=100)
    hours_elapsed: int = 0


Prediction = Annotated[TonerPrediction | ColorPrinterPrediction, Field(discriminator="kind")]


class FuserPrediction(BaseModel):
    current_level: float = Field(ge=0.0, le=100.0)
    pages_remaining: int = Field(ge=0)
    status: ConsumableStatus
    pages_used: int = Field(ge=0)
    lifespan: int
    hours_elapsed: int = 0
    days_elapsed: int = 0
    estimated_usage: int = 0


# ── Batch / fleet results ─────────────────────────────────────────────────────


class BatchResult(BaseModel):
    updated_printers: list[Printer]
    updated_count: int = 0
    critical_count: int = 0
    failed_ids: list[str] = Field(default_factory=list)


class FuserBatchResult(BaseModel):
    updated_fusers: list[Fuser]
    updated_count: int = 0
    critical_count: int = 0
    warning_count: int = 0
    failed_ids: list[str] = Field(default_factory=list)


class FleetSummary(BaseModel):
    total: int = 0
    critical: int = 0
    warning: int = 0
    normal: int = 0
    critical_fusers: int = 0
    warning_fusers: int = 0
    stale: int = 0
