"""Testing generators – sample catalogs and hypothesis strategies."""
from secure_catalog.testing.generators.builder import Builder, CatalogBuilder
from secure_catalog.testing.generators.strategies import (
    access_context_strategy,
    catalog_mode_strategy,
    data_limits_strategy,
    principal_strategy,
    workspace_limits_strategy,
)

__all__ = [
    "Builder",
    "CatalogBuilder",
    "access_context_strategy",
    "catalog_mode_strategy",
    "data_limits_strategy",
    "principal_strategy",
    "workspace_limits_strategy",
]
