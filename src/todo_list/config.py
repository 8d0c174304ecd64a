# src/todo_list/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default; a bare checkout runs without configuration.
- Command-line flags override single values via Settings.with_overrides().
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

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


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Shell ----
    color: bool
    messages_path: Path | None

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path
    log_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        color = _env_bool(_k("COLOR"), True)
        messages_path = _env_optional_path(_k("MESSAGES_PATH"))

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.json")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            color=color,
            messages_path=messages_path,
            data_dir=data_dir,
            tasks_path=tasks_path,
            log_dir=log_dir,
        )

    def with_overrides(
        self,
        *,
        tasks_path: str | Path | None = None,
        messages_path: str | Path | None = None,
        color: bool | None = None,
        log_level: str | None = None,
    ) -> "Settings":
        """Return a copy with the given (non-None) values replaced."""
        changes: dict[str, object] = {}
        if tasks_path is not None:
            changes["tasks_path"] = Path(tasks_path).expanduser()
        if messages_path is not None:
            changes["messages_path"] = Path(messages_path).expanduser()
        if color is not None:
            changes["color"] = color
        if log_level is not None:
            changes["log_level"] = log_level
        return replace(self, **changes)


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
