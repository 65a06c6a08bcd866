"""
src/i18n/translator.py
───────────────────────
Status label lookup from JSON locale files (es default, en).

    t("status.critical")              # → "Crítico"
    t("fuser_status.warning", "en")   # → "Warning - Replace Soon"

The default language comes from settings.DEFAULT_LANG; unsupported
languages fall back to Spanish.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from config.settings import settings

_LOCALES_DIR = Path(__file__).parent / "locales"
_SUPPORTED = ("es", "en")


def _resolve(lang: str | None) -> str:
    lang = lang or settings.DEFAULT_LANG
    return lang if lang in _SUPPORTED else "es"


@lru_cache(maxsize=len(_SUPPORTED))
def _labels(lang: str) -> dict[str, dict[str, str]]:
    with open(_LOCALES_DIR / f"{lang}.json", encoding="utf-8") as f:
        return json.load(f)


def t(key: str, lang: str | None = None) -> str:
    """Look up a "group.name" label; unknown keys come back unchanged."""
    group, _, name = key.partition(".")
    return _labels(_resolve(lang)).get(group, {}).get(name, key)
