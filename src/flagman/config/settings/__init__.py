"""Config settings – 12-factor env-based configuration."""
from flagman.config.settings.factory import SettingsFactory
from flagman.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from flagman.config.settings.sync import SyncSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "SettingsFactory",
    "SettingsLoader",
    "SyncSettings",
]
