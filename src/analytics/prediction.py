"""
src/analytics/prediction.py
───────────────────────────
Printer-level prediction dispatch.

predict_printer picks the variant by printer type instead of probing
the shape of the result:
  monochrome → TonerPrediction        (kind="mono")
  color      → ColorPrinterPrediction (kind="color")
"""
from __future__ import annotations

from datetime import datetime

from src.analytics.color import predict_color
from src.analytics.depletion import hourly_rate, predict_toner
from src.data.models import Prediction, Printer, PrinterType


def predict_printer(printer: Printer, now: datetime) -> Prediction:
    if printer.type == PrinterType.COLOR:
        return predict_color(printer, now)
    return predict_toner(
        printer.current_toner_level,
        printer.toner_capacity,
        printer.effective_daily_usage,
        printer.updated_at,
        now,
    )


def display_level(prediction: Prediction) -> float:
    """Adjusted level for monochrome printers, average level for color ones."""
    if prediction.kind == "color":
        return float(prediction.average_level)
    return prediction.adjusted_level


def detailed_prediction(printer: Printer, now: datetime) -> dict:
    """
    Prediction plus the printer snapshot and consumption breakdown shown in
    the printer details view.
    """
    prediction = predict_printer(printer, now)
    usage = printer.effective_daily_usage
    daily_pct = usage / printer.toner_capacity * 100.0 if usage > 0 else 0.0

    return {
        "prediction": prediction,
        "printer_info": {
            "model": printer.model,
            "location": printer.location,
            "original_level": printer.current_toner_level,
            "last_update": printer.updated_at,
        },
        "consumption": {
            "daily_pages": usage,
            "daily_percentage": round(daily_pct, 4),
            "hourly_percentage": round(hourly_rate(usage, printer.toner_capacity), 4),
        },
    }
