"""Settings of the secured catalog."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from secure_catalog.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsFactory
from secure_catalog.config.validation import InvalidSettingValueError
from secure_catalog.security.limits import CatalogMode


@dataclasses.dataclass
class SecureCatalogSettings(Settings):
    """Environment variables use the ``SECURE_CATALOG_`` prefix, e.g.
    ``SECURE_CATALOG_CAPABILITIES_REQUESTS=GetCapabilities,DescribeLayer``.
    """

    _prefix: ClassVar[str] = "SECURE_CATALOG"

    #: Authority that bypasses the query security predicate.
    admin_role: str = "ROLE_ADMINISTRATOR"
    #: Request kinds treated as capability enumeration (case-insensitive).
    capabilities_requests: list[str] = dataclasses.field(default_factory=lambda: ["GetCapabilities"])
    #: Disclosure mode used when the access manager returns no limits.
    default_mode: str = CatalogMode.HIDE.value

    def _validate(self) -> None:
        if not self.admin_role:
            raise InvalidSettingValueError("admin_role", self.admin_role, "must not be empty")
        try:
            CatalogMode(str(self.default_mode).upper())
        except ValueError:
            raise InvalidSettingValueError(
                "default_mode",
                self.default_mode,
                f"expected one of {', '.join(m.value for m in CatalogMode)}",
            ) from None

    @property
    def catalog_mode(self) -> CatalogMode:
        return CatalogMode(str(self.default_mode).upper())

    @classmethod
    def from_env(cls, env_file: str | None = None, **overrides: object) -> "SecureCatalogSettings":
        """Read the environment, layered over *env_file* when one is given.

        Any invalid or missing value raises; the settings never fall back to
        their defaults on a bad configuration.
        """
        loader = DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
        return SettingsFactory.create(cls, loaders=[loader], overrides=overrides or None, strict=True)


__all__ = ["SecureCatalogSettings"]
