"""Catalog – domain model, storage port, and in-memory storage."""
from secure_catalog.catalog.memory import InMemoryCatalog
from secure_catalog.catalog.model import (
    CATALOG_TYPES,
    CatalogInfo,
    Coverage,
    CoverageStore,
    DataStore,
    FeatureType,
    Layer,
    LayerGroup,
    LayerGroupMode,
    Map,
    Namespace,
    PublishedInfo,
    ResourceInfo,
    StoreInfo,
    Style,
    WMSLayer,
    WMSStore,
    Workspace,
)
from secure_catalog.catalog.port import Catalog, SortBy

__all__ = [
    "CATALOG_TYPES",
    "Catalog",
    "CatalogInfo",
    "Coverage",
    "CoverageStore",
    "DataStore",
    "FeatureType",
    "InMemoryCatalog",
    "Layer",
    "LayerGroup",
    "LayerGroupMode",
    "Map",
    "Namespace",
    "PublishedInfo",
    "ResourceInfo",
    "SortBy",
    "StoreInfo",
    "Style",
    "WMSLayer",
    "WMSStore",
    "Workspace",
]
