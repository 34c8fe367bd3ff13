"""Application configuration.

Centralizes the environment-driven settings used by the storage gateway,
the activity log database and the logging helpers.
"""

import logging
import os
from pathlib import Path

from core.exceptions import ConfigurationError

BASE_DIR = Path(__file__).resolve().parents[1]


def _int_env(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}", config_key=key)


def _level_env(key: str, default: str) -> int:
    name = os.environ.get(key, default).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level {name!r}", config_key=key)
    return level


class Settings:
    """Snapshot of the environment at construction time."""

    def __init__(self):
        self.data_dir = Path(os.environ.get("MEALPLANNER_DATA_DIR", str(BASE_DIR / "var")))
        self.database_url = os.environ.get("DATABASE_URL", "sqlite:///mealplanner.db")
        self.log_level = _level_env("LOG_LEVEL", "INFO")
        # 0 means "return every suggestion"
        self.suggestion_limit = _int_env("SUGGESTION_LIMIT", 0)


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
