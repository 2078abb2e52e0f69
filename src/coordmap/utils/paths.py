"""Helpers for resolving the coordmap config root directory."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

CONFIG_ROOT_ENV = "COORDMAP_CONFIG_ROOT"

_CONFIG_ROOT: Optional[Path] = None


def set_config_root(path: str | Path) -> None:
    """Explicitly set the config root directory."""
    global _CONFIG_ROOT  # pylint: disable=global-statement
    resolved = Path(path).resolve()
    _CONFIG_ROOT = resolved
    os.environ[CONFIG_ROOT_ENV] = str(resolved)


def reset_config_root() -> None:
    """Forget any explicitly set or cached config root."""
    global _CONFIG_ROOT  # pylint: disable=global-statement
    _CONFIG_ROOT = None
    os.environ.pop(CONFIG_ROOT_ENV, None)


def get_config_root() -> Path:
    """Return the config root directory for resolving relative paths."""
    global _CONFIG_ROOT  # pylint: disable=global-statement
    if _CONFIG_ROOT is not None:
        return _CONFIG_ROOT
    env_value = os.getenv(CONFIG_ROOT_ENV)
    if env_value:
        _CONFIG_ROOT = Path(env_value).resolve()
        return _CONFIG_ROOT
    return Path.cwd()
