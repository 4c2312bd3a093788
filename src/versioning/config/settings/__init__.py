"""Config settings – env-based configuration."""
from versioning.config.settings.base import Settings
from versioning.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from versioning.config.settings.app import VersioningSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "VersioningSettings",
]
