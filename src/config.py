"""Settings resolved from environment variables (+ optional .env).

Priority for every value: real env var > .env entry > default. The backing
file can additionally be overridden on the command line with --file.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TODO"
DEFAULT_DATA_FILE = Path("todo.json")
DEFAULT_LOG_LEVEL = "WARNING"

_ENV_LOADED = False


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def load_environment() -> None:
    """Load ./.env once; variables already set in the environment win."""
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    _ENV_LOADED = True


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


def _env_level(name: str, default: str) -> str:
    raw = (os.getenv(name) or "").strip().upper()
    return raw if raw in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} else default


@dataclass(frozen=True)
class Settings:
    data_file: Path
    log_level: str
    log_file: Optional[Path]


def load_settings(data_file: Optional[Path] = None) -> Settings:
    """Resolve settings; an explicit data_file beats TODO_FILE."""
    load_environment()
    return Settings(
        data_file=data_file or _env_path(_k("FILE"), DEFAULT_DATA_FILE),
        log_level=_env_level(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL),
        log_file=_env_path(_k("LOG_FILE"), None),
    )
