"""Environment-driven settings. `.env` is loaded by the app entry point before this is read."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

_ROOT = Path(__file__).parent.parent.parent
_SUPPORTED_LANGS = ("en", "ko")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    data_path: Path  # CSV of the happiness report
    lang: str | None  # Forced UI language; None = detect from browser
    log_level: str


def load_settings() -> Settings:
    """Read settings from the process environment.

    Variables:
        HAPPINESS_DATA_PATH: CSV path, relative paths resolve against the repo root.
        HAPPINESS_LANG: 'en' or 'ko' to force the UI language.
        HAPPINESS_LOG_LEVEL: stdlib logging level name.
    """
    data_path = Path(os.environ.get("HAPPINESS_DATA_PATH", "data/2019.csv"))
    if not data_path.is_absolute():
        data_path = _ROOT / data_path

    lang: str | None = os.environ.get("HAPPINESS_LANG") or None
    if lang is not None and lang not in _SUPPORTED_LANGS:
        logger.warning("Unsupported HAPPINESS_LANG %r, falling back to 'en'", lang)
        lang = "en"

    return Settings(
        data_path=data_path,
        lang=lang,
        log_level=os.environ.get("HAPPINESS_LOG_LEVEL", "INFO"),
    )
