"""Catalog domain model — the closed set of securable catalog objects.

Hierarchy::

    CatalogInfo
    ├── Workspace
    ├── Namespace
    ├── StoreInfo            → Workspace
    │   ├── DataStore
    │   ├── CoverageStore
    │   └── WMSStore
    ├── ResourceInfo         → StoreInfo
    │   ├── FeatureType
    │   ├── Coverage
    │   └── WMSLayer
    ├── PublishedInfo
    │   ├── Layer            → ResourceInfo
    │   └── LayerGroup       → [PublishedInfo], Workspace?
    ├── Style                → Workspace?
    └── Map

Objects compare by identity: two distinct instances with the same content are
different catalog objects until the storage layer says otherwise.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, ClassVar


@dataclasses.dataclass(eq=False)
class CatalogInfo:
    """Named, addressable catalog object."""

    name: str = ""
    id: str | None = None

    #: Methods that hand out data (as opposed to descriptive metadata).
    content_accessors: ClassVar[frozenset[str]] = frozenset()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, id={self.id!r})"


@dataclasses.dataclass(eq=False, repr=False)
class Workspace(CatalogInfo):
    pass


@dataclasses.dataclass(eq=False, repr=False)
class Namespace(CatalogInfo):
    """XML namespace paired with the workspace of the same name."""

    uri: str = ""

    @property
    def prefix(self) -> str:
        return self.name

    @prefix.setter
    def prefix(self, value: str) -> None:
        self.name = value


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------


@dataclasses.dataclass(eq=False, repr=False)
class StoreInfo(CatalogInfo):
    workspace: Workspace | None = None
    description: str | None = None
    enabled: bool = True
    connection_parameters: dict[str, Any] = dataclasses.field(default_factory=dict)
    #: Opaque data access handle attached by the storage layer.
    handle: Any = dataclasses.field(default=None, repr=False)


@dataclasses.dataclass(eq=False, repr=False)
class DataStore(StoreInfo):
    content_accessors: ClassVar[frozenset[str]] = frozenset({"get_data_access"})

    def get_data_access(self) -> Any:
        return self.handle


@dataclasses.dataclass(eq=False, repr=False)
class CoverageStore(StoreInfo):
    type: str | None = None
    url: str | None = None

    content_accessors: ClassVar[frozenset[str]] = frozenset({"get_format"})

    def get_format(self) -> Any:
        return self.handle


@dataclasses.dataclass(eq=False, repr=False)
class WMSStore(StoreInfo):
    capabilities_url: str | None = None

    content_accessors: ClassVar[frozenset[str]] = frozenset({"get_web_map_server"})

    def get_web_map_server(self) -> Any:
        return self.handle


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


@dataclasses.dataclass(eq=False, repr=False)
class ResourceInfo(CatalogInfo):
    store: StoreInfo | None = None
    namespace: Namespace | None = None
    title: str | None = None
    abstract: str | None = None
    keywords: list[str] = dataclasses.field(default_factory=list)
    enabled: bool = True
    handle: Any = dataclasses.field(default=None, repr=False)

    @property
    def workspace(self) -> Workspace | None:
        return self.store.workspace if self.store is not None else None

    def prefixed_name(self) -> str:
        if self.namespace is not None:
            return f"{self.namespace.prefix}:{self.name}"
        return self.name


@dataclasses.dataclass(eq=False, repr=False)
class FeatureType(ResourceInfo):
    content_accessors: ClassVar[frozenset[str]] = frozenset({"get_feature_source"})

    def get_feature_source(self) -> Any:
        return self.handle


@dataclasses.dataclass(eq=False, repr=False)
class Coverage(ResourceInfo):
    native_format: str | None = None

    content_accessors: ClassVar[frozenset[str]] = frozenset({"get_grid_coverage_reader"})

    def get_grid_coverage_reader(self) -> Any:
        return self.handle


@dataclasses.dataclass(eq=False, repr=False)
class WMSLayer(ResourceInfo):
    content_accessors: ClassVar[frozenset[str]] = frozenset({"get_web_map_server"})

    def get_web_map_server(self) -> Any:
        return self.handle


# ---------------------------------------------------------------------------
# Published objects
# ---------------------------------------------------------------------------


@dataclasses.dataclass(eq=False, repr=False)
class PublishedInfo(CatalogInfo):
    title: str | None = None
    enabled: bool = True


@dataclasses.dataclass(eq=False, repr=False)
class Style(CatalogInfo):
    workspace: Workspace | None = None
    filename: str | None = None


@dataclasses.dataclass(eq=False, repr=False)
class Layer(PublishedInfo):
    """Publication of a resource; named after it unless a name is given."""

    resource: ResourceInfo | None = None
    default_style: Style | None = None
    styles: list[Style] = dataclasses.field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name and self.resource is not None:
            self.name = self.resource.name

    @property
    def workspace(self) -> Workspace | None:
        return self.resource.workspace if self.resource is not None else None


class LayerGroupMode(str, Enum):
    SINGLE = "SINGLE"
    NAMED = "NAMED"
    CONTAINER = "CONTAINER"
    #: Earth Observation: the root layer is exposed alongside the group.
    EO = "EO"


@dataclasses.dataclass(eq=False, repr=False)
class LayerGroup(PublishedInfo):
    layers: list[PublishedInfo] = dataclasses.field(default_factory=list)
    styles: list[Style | None] = dataclasses.field(default_factory=list)
    mode: LayerGroupMode = LayerGroupMode.SINGLE
    root_layer: Layer | None = None
    root_layer_style: Style | None = None
    workspace: Workspace | None = None

    def prefixed_name(self) -> str:
        if self.workspace is not None:
            return f"{self.workspace.name}:{self.name}"
        return self.name


@dataclasses.dataclass(eq=False, repr=False)
class Map(CatalogInfo):
    layers: list[Layer] = dataclasses.field(default_factory=list)
    enabled: bool = True


#: Concrete variants, in dispatch order.
CATALOG_TYPES: tuple[type[CatalogInfo], ...] = (
    Workspace,
    Namespace,
    DataStore,
    CoverageStore,
    WMSStore,
    FeatureType,
    Coverage,
    WMSLayer,
    Layer,
    LayerGroup,
    Style,
    Map,
)


__all__ = [
    "CATALOG_TYPES",
    "CatalogInfo",
    "Coverage",
    "CoverageStore",
    "DataStore",
    "FeatureType",
    "Layer",
    "LayerGroup",
    "LayerGroupMode",
    "Map",
    "Namespace",
    "PublishedInfo",
    "ResourceInfo",
    "StoreInfo",
    "Style",
    "WMSLayer",
    "WMSStore",
    "Workspace",
]
