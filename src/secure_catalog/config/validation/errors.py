"""Config validation errors."""
from secure_catalog.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when configuration or integration is invalid."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class UnsupportedCatalogTypeError(ConfigError):
    """An object outside the known catalog variants reached the security layer.

    This is an integration bug, not an access decision; callers must not
    treat it as "hidden" or retry.
    """
    default_code = "unsupported_catalog_type"

    def __init__(self, obj: object, operation: str = "resolve an access policy") -> None:
        super().__init__(
            f"Cannot {operation} for objects of type {type(obj).__module__}.{type(obj).__qualname__}"
        )
        self.object_type = type(obj)


__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "UnsupportedCatalogTypeError",
]
