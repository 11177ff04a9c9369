# src/taskdeck/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKDECK"

STORAGE_BACKENDS = ("sqlite", "memory")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Storage ----
    data_dir: Path
    storage_backend: str
    storage_path: Path
    storage_key: str

    # ---- Console defaults ----
    default_priority: str
    default_filter: str
    default_sort: str
    confirm_delete: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskdeck").strip() or "taskdeck"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskdeck"))
        storage_backend = _env_choice(_k("STORAGE_BACKEND"), "sqlite", STORAGE_BACKENDS)
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / "tasks.sqlite3")
        storage_key = _env(_k("STORAGE_KEY"), "dynamicTaskManagerTasks").strip() or "dynamicTaskManagerTasks"

        default_priority = _env(_k("DEFAULT_PRIORITY"), "Medium")
        default_filter = _env(_k("DEFAULT_FILTER"), "all")
        default_sort = _env(_k("DEFAULT_SORT"), "latest")
        confirm_delete = _env_bool(_k("CONFIRM_DELETE"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_backend=storage_backend,
            storage_path=storage_path,
            storage_key=storage_key,
            default_priority=default_priority,
            default_filter=default_filter,
            default_sort=default_sort,
            confirm_delete=confirm_delete,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
