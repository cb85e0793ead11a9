# src/todos/config.py

"""Settings loaded from environment variables (+ optional .env).

One Settings object for the whole app; every field has a default, so nothing
has to be configured for the CLI to work.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODOS"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def default_tasks_path() -> Path:
    return Path(tempfile.gettempdir()) / "tasks.txt"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Storage ----
    tasks_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todos").strip() or "todos"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip() or "WARNING"
        log_file = _env_path(_k("LOG_FILE"), None)
        tasks_path = _env_path(_k("TASKS_PATH"), default_tasks_path()) or default_tasks_path()

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            tasks_path=tasks_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
