from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from task_tracker.storage import DEFAULT_DB_FILE

_FALSY = {"0", "false", "no", "off", ""}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    db_path: Path = Path(DEFAULT_DB_FILE)
    strict_load: bool = False
    lock_timeout: float = 10.0
    log_level: str = "INFO"


def _truthy_env(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in _FALSY


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build settings from ``TASK_TRACKER_*`` environment variables."""
    env = os.environ if env is None else env

    raw_timeout = env.get("TASK_TRACKER_LOCK_TIMEOUT", "10")
    try:
        lock_timeout = float(raw_timeout)
    except ValueError as exc:
        raise ValueError(f"TASK_TRACKER_LOCK_TIMEOUT must be a number (got {raw_timeout!r})") from exc
    if lock_timeout <= 0:
        raise ValueError(f"TASK_TRACKER_LOCK_TIMEOUT must be positive (got {raw_timeout!r})")

    log_level = env.get("TASK_TRACKER_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(
            f"TASK_TRACKER_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)} (got {log_level!r})"
        )

    return Settings(
        db_path=Path(env.get("TASK_TRACKER_DB", DEFAULT_DB_FILE)),
        strict_load=_truthy_env(env.get("TASK_TRACKER_STRICT")),
        lock_timeout=lock_timeout,
        log_level=log_level,
    )
