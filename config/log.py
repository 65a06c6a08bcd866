"""
config/log.py
─────────────
Logging setup for the tracker.

Modules log through ``logging.getLogger(__name__)``; this module only
attaches handlers to the root logger once, at host startup.

Format:
    2026-10-18 10:15:30 [INFO    ] src.analytics.batch - 3 printer(s) caught up
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int = "INFO", log_dir: str | Path | None = None) -> logging.Logger:
    """
    Configure the root logger with a console handler and, when ``log_dir``
    is given, a rotating file handler (10 MB × 5).

    Safe to call more than once: existing handlers are replaced.
    """
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=path / "toner_tracker.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        root.info("File logging enabled: %s", path / "toner_tracker.log")

    return root
