"""
secure_catalog – authorization decisions and restricted views for a
hierarchical resource catalog.

Import path convention::

    from secure_catalog.catalog import InMemoryCatalog, Workspace
    from secure_catalog.security import SecureCatalog, WorkspaceAccessLimits
    from secure_catalog.kernel.security import Principal, SecurityContext
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
