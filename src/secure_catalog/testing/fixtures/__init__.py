"""Testing fixtures – pytest fixtures for the secured catalog.

Register in your ``conftest.py``::

    pytest_plugins = ["secure_catalog.testing.fixtures"]
"""
try:
    import pytest  # noqa: F401

    from secure_catalog.testing.fixtures.catalog import access_manager, sample_catalog, secure_catalog
    from secure_catalog.testing.fixtures.principal import fake_principal, security_context

except ImportError:
    pass

__all__ = [
    "access_manager",
    "fake_principal",
    "sample_catalog",
    "secure_catalog",
    "security_context",
]
