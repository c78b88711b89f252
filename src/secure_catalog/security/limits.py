"""Access limits — raw permission data supplied by a ResourceAccessManager."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from secure_catalog.catalog.model import CatalogInfo
from secure_catalog.kernel.query import EXCLUDE, INCLUDE, BaseSpecification
from secure_catalog.kernel.security import Principal


class CatalogMode(str, Enum):
    """How an object the principal cannot read is disclosed."""

    #: Pretend the object does not exist.
    HIDE = "HIDE"
    #: Hide while enumerating capabilities, challenge on direct access.
    MIXED = "MIXED"
    #: Show metadata, challenge on data access.
    CHALLENGE = "CHALLENGE"


@dataclasses.dataclass(frozen=True)
class AccessLimits:
    mode: CatalogMode = CatalogMode.HIDE


@dataclasses.dataclass(frozen=True)
class WorkspaceAccessLimits(AccessLimits):
    readable: bool = True
    writable: bool = True
    adminable: bool = False


@dataclasses.dataclass(frozen=True)
class DataAccessLimits(AccessLimits):
    """Limits on a resource's data; ``EXCLUDE`` as read filter denies reads."""

    read_filter: BaseSpecification = INCLUDE

    @property
    def can_read(self) -> bool:
        return self.read_filter is not EXCLUDE


@dataclasses.dataclass(frozen=True)
class VectorAccessLimits(DataAccessLimits):
    """Vector data may be writable; a ``None`` filter is unrestricted."""

    write_filter: BaseSpecification | None = INCLUDE
    read_attributes: tuple[str, ...] | None = None
    write_attributes: tuple[str, ...] | None = None

    @property
    def can_write(self) -> bool:
        return self.write_filter is not EXCLUDE


@dataclasses.dataclass(frozen=True)
class CoverageAccessLimits(DataAccessLimits):
    #: Spatial restriction on the raster (opaque geometry).
    raster_filter: Any = None


@dataclasses.dataclass(frozen=True)
class WMSAccessLimits(DataAccessLimits):
    allow_feature_info: bool = True


@dataclasses.dataclass(frozen=True)
class StyleAccessLimits(AccessLimits):
    """Presence alone restricts the style."""


@dataclasses.dataclass(frozen=True)
class LayerGroupAccessLimits(AccessLimits):
    """Presence alone restricts the layer group."""


@runtime_checkable
class ResourceAccessManager(Protocol):
    """Port: supplies the access limits of *principal* on a catalog object.

    Must answer deterministically for the same ``(principal, obj)`` within a
    call. ``None`` means "no limits": full access, with the configured
    default disclosure mode applying wherever access is denied anyway.
    """

    def get_access_limits(self, principal: Principal | None, obj: CatalogInfo) -> AccessLimits | None: ...


__all__ = [
    "AccessLimits",
    "CatalogMode",
    "CoverageAccessLimits",
    "DataAccessLimits",
    "LayerGroupAccessLimits",
    "ResourceAccessManager",
    "StyleAccessLimits",
    "VectorAccessLimits",
    "WMSAccessLimits",
    "WorkspaceAccessLimits",
]
