"""Helpers for loading coordmap configuration files."""
from __future__ import annotations

from pathlib import Path

from coordmap.config.manager import DEFAULT_CONFIG_RELATIVE_PATH, ConfigManager
from coordmap.config.schema import BaseConfig
from coordmap.utils.paths import get_config_root


def resolve_config_path(raw_path: str | Path | None) -> Path:
    """Resolve a config path relative to the config root."""
    path = Path(raw_path or DEFAULT_CONFIG_RELATIVE_PATH).expanduser()
    if not path.is_absolute():
        path = (get_config_root() / path).resolve()
    return path


def load_coordmap_config(raw_path: str | Path | None = None) -> BaseConfig:
    """Load and validate a coordmap configuration file."""
    path = resolve_config_path(raw_path)
    manager = ConfigManager(config=str(path))
    return manager.config


__all__ = ["load_coordmap_config", "resolve_config_path", "DEFAULT_CONFIG_RELATIVE_PATH"]
