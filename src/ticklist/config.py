# src/ticklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Bad values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TICKLIST"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path
    file_logging: bool

    # ---- Engine ----
    delete_delay_ms: int

    # ---- Console rendering ----
    bar_width: int

    @property
    def delete_delay_seconds(self) -> float:
        return self.delete_delay_ms / 1000.0

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "ticklist").strip() or "ticklist"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        # Only log files live here; tasks are never persisted.
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/ticklist"))
        file_logging = _env_bool(_k("FILE_LOGGING"), True)

        # 200 ms matches the row fade-out in graphical clients.
        delete_delay_ms = max(0, _env_int(_k("DELETE_DELAY_MS"), 200))
        bar_width = max(5, _env_int(_k("BAR_WIDTH"), 30))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            file_logging=file_logging,
            delete_delay_ms=delete_delay_ms,
            bar_width=bar_width,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
