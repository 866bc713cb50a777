from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import streamlit as st
from streamlit.errors import StreamlitSecretNotFoundError

from swiss_health_tracker.constants import TREND_WINDOW_DAYS
from swiss_health_tracker.storage import DATA_DIR_ENV, resolve_data_directory

TREND_DAYS_ENV = "SWISS_HEALTH_TREND_DAYS"
LOG_LEVEL_ENV = "SWISS_HEALTH_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AppConfig:
    data_dir: Path
    trend_window_days: int = TREND_WINDOW_DAYS
    log_level: str = "INFO"


def _get_secret(name: str) -> str | None:
    try:
        value = st.secrets.get(name)
    except (StreamlitSecretNotFoundError, FileNotFoundError):
        value = None
    if value:
        return str(value).strip()
    env_value = os.getenv(name)
    if env_value:
        return env_value.strip()
    return None


def _parse_positive_int(raw: str | None, default: int) -> int:
    try:
        return max(1, int(raw)) if raw else default
    except ValueError:
        return default


def load_config() -> AppConfig:
    """Resolve settings from Streamlit secrets first, then the environment."""

    data_dir = resolve_data_directory(_get_secret(DATA_DIR_ENV))
    trend_days = _parse_positive_int(_get_secret(TREND_DAYS_ENV), TREND_WINDOW_DAYS)
    log_level = (_get_secret(LOG_LEVEL_ENV) or "INFO").upper()
    return AppConfig(data_dir=data_dir, trend_window_days=trend_days, log_level=log_level)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


__all__ = ["AppConfig", "configure_logging", "load_config"]
