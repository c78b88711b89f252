"""Config validation errors."""
from secure_catalog.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    UnsupportedCatalogTypeError,
)

__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "UnsupportedCatalogTypeError",
]
