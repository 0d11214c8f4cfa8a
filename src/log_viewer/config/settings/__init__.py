"""Config settings – 12-factor configuration with layered loaders."""
from log_viewer.config.settings.base import Settings
from log_viewer.config.settings.factory import SettingsFactory
from log_viewer.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    JsonFileSettingsLoader,
    SettingsLoader,
)

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "JsonFileSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
