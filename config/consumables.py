"""
config/consumables.py
─────────────────────
Consumable thresholds, color registry, and status display configuration.

Toner urgency uses two independent signals (days left and level left):
  critical: days ≤ 3  or level ≤ 10 %
  warning : days ≤ 7  or level ≤ 25 %
  normal  : otherwise

Fuser urgency is level-only:
  critical: level ≤ 10 %
  warning : level ≤ 15 %
"""
from dataclasses import dataclass
from enum import Enum


class ConsumableStatus(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    NORMAL = "normal"


class TonerColor(str, Enum):
    CYAN = "cyan"
    MAGENTA = "magenta"
    YELLOW = "yellow"
    BLACK = "black"
    PHOTO_BLACK = "photo_black"
    MATTE_BLACK = "matte_black"
    GRAY = "gray"
    LIGHT_CYAN = "light_cyan"
    LIGHT_MAGENTA = "light_magenta"


@dataclass(frozen=True)
class TonerThresholds:
    critical_days: int
    warning_days: int
    critical_level: float
    warning_level: float


@dataclass(frozen=True)
class FuserThresholds:
    critical_level: float
    warning_level: float


@dataclass(frozen=True)
class CatchUpPolicy:
    min_hours: int               # elapsed whole hours before anything moves
    level_tolerance_pct: float   # batch "updated" tolerance for toner levels
    pages_tolerance: float       # batch "updated" tolerance for fuser pages


TONER_THRESHOLDS = TonerThresholds(
    critical_days=3,
    warning_days=7,
    critical_level=10.0,
    warning_level=25.0,
)

FUSER_THRESHOLDS = FuserThresholds(critical_level=10.0, warning_level=15.0)

CATCH_UP = CatchUpPolicy(min_hours=1, level_tolerance_pct=0.1, pages_tolerance=1.0)


# ── Color registry ────────────────────────────────────────────────────────────
COLOR_OPTIONS: dict[str, dict[str, str]] = {
    TonerColor.CYAN: {"name": "Cian (C)", "code": "#00FFFF"},
    TonerColor.MAGENTA: {"name": "Magenta (M)", "code": "#FF00FF"},
    TonerColor.YELLOW: {"name": "Amarillo (Y)", "code": "#FFFF00"},
    TonerColor.BLACK: {"name": "Negro (K)", "code": "#000000"},
    TonerColor.PHOTO_BLACK: {"name": "Negro Fotográfico (PK)", "code": "#1a1a1a"},
    TonerColor.MATTE_BLACK: {"name": "Negro Mate (MK)", "code": "#333333"},
    TonerColor.GRAY: {"name": "Gris (G)", "code": "#808080"},
    TonerColor.LIGHT_CYAN: {"name": "Cian Claro", "code": "#87CEEB"},
    TonerColor.LIGHT_MAGENTA: {"name": "Magenta Claro", "code": "#FFB6C1"},
}

DEFAULT_COLOR_CODE = "#000000"


def get_color_display_name(color: str) -> str:
    option = COLOR_OPTIONS.get(color)
    return option["name"] if option else str(color)


def get_color_code(color: str) -> str:
    option = COLOR_OPTIONS.get(color)
    return option["code"] if option else DEFAULT_COLOR_CODE


# ── Status display ────────────────────────────────────────────────────────────
STATUS_COLORS: dict[str, str] = {
    ConsumableStatus.CRITICAL: "#da3633",
    ConsumableStatus.WARNING: "#e8a020",
    ConsumableStatus.NORMAL: "#2ea44f",
}

STATUS_CLASSES: dict[str, str] = {
    ConsumableStatus.CRITICAL: "text-red-600 bg-red-50",
    ConsumableStatus.WARNING: "text-yellow-600 bg-yellow-50",
    ConsumableStatus.NORMAL: "text-green-600 bg-green-50",
}

# Status ordering for sorting (higher = more urgent)
STATUS_ORDER: dict[str, int] = {
    ConsumableStatus.CRITICAL: 3,
    ConsumableStatus.WARNING: 2,
    ConsumableStatus.NORMAL: 1,
}
