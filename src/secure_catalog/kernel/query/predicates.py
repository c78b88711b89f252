"""Catalog predicates — property based specifications over dotted paths."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from secure_catalog.kernel.query.specification import BaseSpecification

_MISSING = object()


def property_values(candidate: Any, path: str) -> list[Any]:
    """Resolve a dotted *path* against *candidate*.

    Collections met along the way are flattened, so ``"styles.name"`` on a
    layer yields the name of every style. Missing attributes and ``None``
    links yield nothing.
    """
    current: list[Any] = [candidate]
    for part in path.split("."):
        following: list[Any] = []
        for item in current:
            value = getattr(item, part, _MISSING)
            if value is _MISSING or value is None:
                continue
            if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
                following.extend(v for v in value if v is not None)
            else:
                following.append(value)
        current = following
    return current


def property_value(candidate: Any, path: str) -> Any:
    """First value of :func:`property_values`, or ``None``."""
    values = property_values(candidate, path)
    return values[0] if values else None


class PropertyEquals(BaseSpecification[Any]):
    """``path == value``; multi-valued paths match if any value matches."""

    pushdown = True

    def __init__(self, path: str, value: Any) -> None:
        self.path = path
        self.value = value

    def is_satisfied_by(self, candidate: Any) -> bool:
        return any(v == self.value for v in property_values(candidate, self.path))

    def __repr__(self) -> str:
        return f"{self.path} = {self.value!r}"


class PropertyIsNull(BaseSpecification[Any]):
    """``path`` resolves to nothing."""

    pushdown = True

    def __init__(self, path: str) -> None:
        self.path = path

    def is_satisfied_by(self, candidate: Any) -> bool:
        return not property_values(candidate, self.path)

    def __repr__(self) -> str:
        return f"{self.path} IS NULL"


def equal(path: str, value: Any) -> PropertyEquals:
    return PropertyEquals(path, value)


def is_null(path: str) -> PropertyIsNull:
    return PropertyIsNull(path)


def is_pushdown_capable(spec: BaseSpecification[Any]) -> bool:
    """Whether a storage backend could translate *spec* entirely."""
    return bool(spec.pushdown)


__all__ = [
    "PropertyEquals",
    "PropertyIsNull",
    "equal",
    "is_null",
    "is_pushdown_capable",
    "property_value",
    "property_values",
]
