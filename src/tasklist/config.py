# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing required at import time; every field has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"

HTTP_MODES = ("hello", "file")


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


def _default_store_file(backend: str) -> str:
    return "todos.sqlite3" if backend == "sqlite" else "todos.json"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Front-ends ----
    console_enabled: bool
    http_enabled: bool

    # ---- HTTP ----
    http_mode: str
    http_host: str
    http_port: int
    asset_path: Path

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    # ---- Persistence ----
    storage_backend: str
    store_path: Path
    storage_key: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasklist").strip() or "tasklist"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        http_enabled = _env_bool(_k("HTTP_ENABLED"), False)

        http_mode = _env(_k("HTTP_MODE"), "file").strip().lower() or "file"
        http_host = _env(_k("HTTP_HOST"), "127.0.0.1").strip() or "127.0.0.1"
        http_port = _env_int(_k("HTTP_PORT"), 8080)
        asset_path = _env_path(_k("ASSET_PATH"), Path("index.html"))

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasklist"))

        storage_backend = _env(_k("STORAGE_BACKEND"), "json").strip().lower() or "json"
        store_path = _env_path(_k("STORE_PATH"), data_dir / _default_store_file(storage_backend))
        storage_key = _env(_k("STORAGE_KEY"), "todos.v1").strip() or "todos.v1"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            http_enabled=http_enabled,
            http_mode=http_mode,
            http_host=http_host,
            http_port=http_port,
            asset_path=asset_path,
            data_dir=data_dir,
            storage_backend=storage_backend,
            store_path=store_path,
            storage_key=storage_key,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
