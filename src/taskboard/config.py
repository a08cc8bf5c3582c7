# src/taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets required at import time (the session token lives in local storage, not here).
- Settings are injectable: tests build their own object instead of reading the env.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "TASKBOARD"

TRANSPORTS = ("http", "graphql")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float_opt(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def normalize_transport(raw: str | None) -> str:
    name = (raw or "").strip().lower()
    if name in TRANSPORTS:
        return name
    if name:
        logger.warning("Unknown transport %r, falling back to http.", raw)
    return "http"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Backend ----
    transport: str
    api_base_url: str
    graphql_url: str
    request_timeout: Optional[float]

    # ---- Connector flags ----
    console_enabled: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskboard").strip() or "taskboard"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        transport = normalize_transport(_env(_k("TRANSPORT"), "http"))

        api_base_url = _env(_k("API_BASE_URL"), "http://localhost:3000").strip().rstrip("/")
        graphql_url = _env(_k("GRAPHQL_URL"), "").strip() or f"{api_base_url}/graphql"

        # Unset means "no timeout": requests wait for the transport to give up.
        request_timeout = _env_float_opt(_k("REQUEST_TIMEOUT_SECONDS"))

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskboard"))
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / "local_storage.json")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            transport=transport,
            api_base_url=api_base_url,
            graphql_url=graphql_url,
            request_timeout=request_timeout,
            console_enabled=console_enabled,
            data_dir=data_dir,
            storage_path=storage_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
