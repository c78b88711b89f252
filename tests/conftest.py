"""Shared pytest configuration."""

from __future__ import annotations

import pytest

from secure_catalog.kernel.security import RequestScope, SecurityContext

pytest_plugins = ["secure_catalog.testing.fixtures"]


@pytest.fixture(autouse=True)
def _clear_ambient_context():
    SecurityContext.clear()
    RequestScope.clear()
    yield
    SecurityContext.clear()
    RequestScope.clear()
