"""Config – settings, loaders, and configuration errors."""

from secure_catalog.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from secure_catalog.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    UnsupportedCatalogTypeError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "UnsupportedCatalogTypeError",
]
