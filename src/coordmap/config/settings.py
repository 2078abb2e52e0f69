"""Environment-driven settings for locating config and logging."""
from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


def _env_path(name: str) -> str | None:
    raw = os.getenv(name)
    return raw.strip() if raw and raw.strip() else None


@dataclass
class AppSettings:
    """Process-level settings read from the environment (and `.env`)."""

    config_path: str | None = field(default_factory=lambda: _env_path("COORDMAP_CONFIG_PATH"))
    config_root: str | None = field(default_factory=lambda: _env_path("COORDMAP_CONFIG_ROOT"))
    log_level: str | None = field(default_factory=lambda: _env_path("LOG_LEVEL"))
    log_dir: str | None = field(default_factory=lambda: _env_path("LOG_DIR"))


def load_settings(env_file: str | Path | None = None) -> AppSettings:
    """Load settings, reading `env_file` (or a `.env` found from cwd) first.

    Variables already present in the environment win over the file.
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))
    settings = AppSettings()
    if settings.log_level:
        settings.log_level = settings.log_level.upper()
    return settings
