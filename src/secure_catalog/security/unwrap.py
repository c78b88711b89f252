"""Recover the original object behind a security view."""
from __future__ import annotations

from typing import Any

from secure_catalog.security.views import ReadOnlyContent, SecuredInfo


def unwrap(obj: Any) -> Any:
    """Return the object behind any view, or *obj* itself.

    Handles catalog object views, read-only content handles, and secured
    catalogs (yielding the unsecured delegate). Mutations must always be
    given the unwrapped object.
    """
    from secure_catalog.security.catalog import SecureCatalog

    while isinstance(obj, (SecuredInfo, ReadOnlyContent, SecureCatalog)):
        obj = obj.unwrap()
    return obj


__all__ = ["unwrap"]
