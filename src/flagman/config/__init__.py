"""Configuration – run settings, loaders and configuration errors."""
from flagman.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from flagman.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsFactory,
    SettingsLoader,
    SyncSettings,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingsFactory",
    "SettingsLoader",
    "SyncSettings",
]
