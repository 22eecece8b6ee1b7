"""Settings loaded from environment variables.

Color switches (NO_COLOR / FORCE_COLOR) are read by theme at import
time; everything else lives here.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "TASKLIST"
DEFAULT_FILE = "tasklist.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _log_level(raw: Optional[str], default: int = logging.WARNING) -> int:
    if raw is None or not raw.strip():
        return default
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
    tasks_file: Path = Path(DEFAULT_FILE)
    log_level: int = logging.WARNING
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "Settings":
        log_file = os.getenv(_k("LOG_FILE"))
        return cls(
            tasks_file=Path(os.getenv(_k("FILE")) or DEFAULT_FILE),
            log_level=_log_level(os.getenv(_k("LOG_LEVEL"))),
            log_file=Path(log_file) if log_file and log_file.strip() else None,
        )
