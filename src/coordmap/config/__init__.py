from .loader import DEFAULT_CONFIG_RELATIVE_PATH, load_coordmap_config, resolve_config_path
from .manager import ConfigManager
from .schema import BaseConfig, CameraTransformConfig, LoggingConfig
from .settings import AppSettings, load_settings

__all__ = [
    "AppSettings",
    "BaseConfig",
    "CameraTransformConfig",
    "ConfigManager",
    "DEFAULT_CONFIG_RELATIVE_PATH",
    "LoggingConfig",
    "load_coordmap_config",
    "load_settings",
    "resolve_config_path",
]
