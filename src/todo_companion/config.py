# src/todo_companion/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No secrets, no network access at import time.
- Malformed values fall back to defaults instead of failing startup.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .todos.todo_client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from .todos.todo_models import TodoFilter, TodoSort

ENV_PREFIX = "TODO"

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


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if math.isfinite(value) and value > 0 else default


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

    # ---- Remote listing ----
    api_base_url: str
    api_timeout_seconds: float
    fetch_on_start: bool

    # ---- Initial view selections ----
    default_filter: TodoFilter
    default_sort: TodoSort

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))

        api_base_url = _env(_k("API_BASE_URL"), DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL
        api_timeout_seconds = _env_float(_k("API_TIMEOUT_SECONDS"), DEFAULT_TIMEOUT_SECONDS)
        fetch_on_start = _env_bool(_k("FETCH_ON_START"), True)

        default_filter = TodoFilter.parse(os.getenv(_k("DEFAULT_FILTER")))
        default_sort = TodoSort.parse(os.getenv(_k("DEFAULT_SORT")))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            api_base_url=api_base_url,
            api_timeout_seconds=api_timeout_seconds,
            fetch_on_start=fetch_on_start,
            default_filter=default_filter,
            default_sort=default_sort,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
