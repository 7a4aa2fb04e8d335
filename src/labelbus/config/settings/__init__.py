"""Config settings – 12-factor env-based configuration."""
from labelbus.config.settings.base import Settings
from labelbus.config.settings.factory import SettingsFactory
from labelbus.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
