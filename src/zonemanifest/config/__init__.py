"""Configuration module for ZoneManifest."""

from .manager import ConfigManager, get_config_manager
from .models import LoggingSettings, ZoneManifestConfig

__all__ = [
    "ZoneManifestConfig",
    "LoggingSettings",
    "ConfigManager",
    "get_config_manager",
]
