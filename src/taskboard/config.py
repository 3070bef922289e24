# src/taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is created on disk at import time.
- Settings are injectable: bootstrap accepts any object with the same fields.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOARD"

# Local .env never overrides variables that are already set.
load_dotenv(override=False)


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
    log_to_file: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path

    # ---- Persistence ----
    storage_key: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskboard").strip() or "taskboard"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip() or "INFO"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskboard"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.json")

        storage_key = _env(_k("STORAGE_KEY"), "tasks").strip() or "tasks"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            tasks_path=tasks_path,
            storage_key=storage_key,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
