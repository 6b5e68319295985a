# src/crew_schedule/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Everything has a default; nothing is required at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "CREW"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


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
    log_dir: Path
    log_to_file: bool

    # ---- Notifications ----
    notify_prefix: str
    log_notifications: bool

    # ---- Entry point switches ----
    demo_enabled: bool
    console_enabled: bool

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "crew-schedule").strip() or "crew-schedule",
            log_level=_env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO",
            log_dir=_env_path(_k("LOG_DIR"), Path(".local/crew")),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), False),
            notify_prefix=_env(_k("NOTIFY_PREFIX"), "Notification: "),
            log_notifications=_env_bool(_k("LOG_NOTIFICATIONS"), False),
            demo_enabled=_env_bool(_k("DEMO_ENABLED"), True),
            console_enabled=_env_bool(_k("CONSOLE_ENABLED"), False),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Local .env never overrides variables already set in the environment.
    load_dotenv(override=False)
    return Settings.from_env()
