"""Testing support – fakes, fixtures and generators.

Import in your ``conftest.py``::

    pytest_plugins = ["secure_catalog.testing.fixtures"]
"""

from secure_catalog.testing.fakes import FakeResourceAccessManager
from secure_catalog.testing.generators import (
    Builder,
    CatalogBuilder,
    access_context_strategy,
    catalog_mode_strategy,
    data_limits_strategy,
    principal_strategy,
    workspace_limits_strategy,
)

__all__ = [
    "Builder",
    "CatalogBuilder",
    "FakeResourceAccessManager",
    "access_context_strategy",
    "catalog_mode_strategy",
    "data_limits_strategy",
    "principal_strategy",
    "workspace_limits_strategy",
]
