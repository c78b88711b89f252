"""Config settings – 12-factor env-based configuration."""
from secure_catalog.config.settings.base import Settings
from secure_catalog.config.settings.factory import SettingsFactory
from secure_catalog.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
