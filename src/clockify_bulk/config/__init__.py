"""Configuration management for clockify-bulk.

This module provides loading, saving and resolution of the settings
remembered between runs.
"""

from clockify_bulk.config.base import (
    ConfigError,
    ConfigRepository,
    Configurator,
    SettingsOverrides,
    get_config_path,
    resolve_settings,
)

__all__ = [
    "ConfigError",
    "ConfigRepository",
    "Configurator",
    "SettingsOverrides",
    "get_config_path",
    "resolve_settings",
]
