"""InMemoryCatalog — dictionary backed catalog storage.

Intended for unit tests and small embedded deployments. Every filter is
evaluated in process.
"""
from __future__ import annotations

import itertools
import uuid
from typing import Iterator, TypeVar

from secure_catalog.catalog.model import (
    CatalogInfo,
    DataStore,
    Layer,
    LayerGroup,
    LayerGroupMode,
    Namespace,
    ResourceInfo,
    StoreInfo,
    Style,
    Workspace,
)
from secure_catalog.catalog.port import Catalog, SortBy
from secure_catalog.kernel.errors import ConflictError, NotFoundError, ValidationError
from secure_catalog.kernel.query import INCLUDE, BaseSpecification, property_value
from secure_catalog.observability.logging import get_logger

T = TypeVar("T", bound=CatalogInfo)

_log = get_logger(__name__)


def _sort_key(prop: str):
    def key(obj: CatalogInfo) -> tuple[bool, object]:
        value = property_value(obj, prop)
        # ``None`` sorts last in ascending order
        return (value is None, value if value is not None else "")
    return key


class InMemoryCatalog(Catalog):
    """Simple in-process catalog keeping objects in insertion order."""

    def __init__(self) -> None:
        self._objects: dict[str, CatalogInfo] = {}
        self._default_workspace: Workspace | None = None
        self._default_namespace: Namespace | None = None
        self._default_stores: dict[str, DataStore] = {}

    # ------------------------------------------------------------------
    # Query core
    # ------------------------------------------------------------------

    def get_by_id(self, of: type[T], id: str) -> T | None:
        obj = self._objects.get(id)
        return obj if isinstance(obj, of) else None

    def list(
        self,
        of: type[T],
        filter: BaseSpecification = INCLUDE,
        offset: int | None = None,
        count: int | None = None,
        sort_by: SortBy | None = None,
    ) -> Iterator[T]:
        matches: Iterator[T] = (
            obj for obj in list(self._objects.values())
            if isinstance(obj, of) and filter.is_satisfied_by(obj)
        )
        if sort_by is not None:
            matches = iter(sorted(matches, key=_sort_key(sort_by.property), reverse=not sort_by.ascending))
        start = offset or 0
        stop = start + count if count is not None else None
        return itertools.islice(matches, start, stop)

    def count(self, of: type[T], filter: BaseSpecification = INCLUDE) -> int:
        return sum(1 for _ in self.list(of, filter))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, obj: CatalogInfo) -> None:
        if obj.id is not None and obj.id in self._objects:
            raise ConflictError(
                f"{type(obj).__name__} with id '{obj.id}' already exists",
                detail={"id": obj.id},
            )
        errors = self.validate(obj, is_new=True)
        if errors:
            raise errors[0]
        if obj.id is None:
            obj.id = f"{type(obj).__name__}-{uuid.uuid4().hex}"
        self._objects[obj.id] = obj
        self._apply_defaults(obj)
        _log.debug("catalog.added", type=type(obj).__name__, name=obj.name, id=obj.id)

    def save(self, obj: CatalogInfo) -> None:
        current = self._require(obj)
        errors = self.validate(obj, is_new=False)
        if errors:
            raise errors[0]
        self._objects[obj.id] = obj  # type: ignore[index]
        if current is not obj:
            self._replace_defaults(current, obj)
        _log.debug("catalog.saved", type=type(obj).__name__, name=obj.name, id=obj.id)

    def remove(self, obj: CatalogInfo) -> None:
        current = self._require(obj)
        del self._objects[obj.id]  # type: ignore[arg-type]
        if current is self._default_workspace:
            self._default_workspace = None
        if current is self._default_namespace:
            self._default_namespace = None
        self._default_stores = {
            ws_id: store for ws_id, store in self._default_stores.items() if store is not current
        }
        _log.debug("catalog.removed", type=type(obj).__name__, name=obj.name, id=obj.id)

    def validate(self, obj: CatalogInfo, is_new: bool) -> list[ValidationError]:
        errors: list[ValidationError] = []
        kind = type(obj).__name__
        if not obj.name:
            errors.append(ValidationError(f"{kind} name must not be empty", field="name"))
        if isinstance(obj, StoreInfo) and obj.workspace is None:
            errors.append(ValidationError(f"{kind} '{obj.name}' must be part of a workspace", field="workspace"))
        if isinstance(obj, ResourceInfo):
            if obj.store is None:
                errors.append(ValidationError(f"{kind} '{obj.name}' must be part of a store", field="store"))
            if obj.namespace is None:
                errors.append(ValidationError(f"{kind} '{obj.name}' must be part of a namespace", field="namespace"))
        if isinstance(obj, Layer) and obj.resource is None:
            errors.append(ValidationError(f"Layer '{obj.name}' must reference a resource", field="resource"))
        if isinstance(obj, LayerGroup):
            if not obj.layers:
                errors.append(ValidationError(f"Layer group '{obj.name}' must not be empty", field="layers"))
            if obj.mode is LayerGroupMode.EO and obj.root_layer is None:
                errors.append(
                    ValidationError(f"Layer group '{obj.name}' in EO mode needs a root layer", field="root_layer")
                )
        if obj.name and self._name_taken(obj):
            errors.append(ValidationError(f"{kind} named '{obj.name}' already exists", field="name"))
        return errors

    def detach(self, obj: T) -> T:
        return obj

    # ------------------------------------------------------------------
    # Defaults
    # ------------------------------------------------------------------

    def get_default_workspace(self) -> Workspace | None:
        return self._default_workspace

    def set_default_workspace(self, workspace: Workspace | None) -> None:
        self._default_workspace = workspace

    def get_default_namespace(self) -> Namespace | None:
        return self._default_namespace

    def set_default_namespace(self, namespace: Namespace | None) -> None:
        self._default_namespace = namespace

    def get_default_data_store(self, workspace: Workspace) -> DataStore | None:
        return self._default_stores.get(workspace.id or workspace.name)

    def set_default_data_store(self, workspace: Workspace, store: DataStore | None) -> None:
        key = workspace.id or workspace.name
        if store is None:
            self._default_stores.pop(key, None)
        else:
            self._default_stores[key] = store

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require(self, obj: CatalogInfo) -> CatalogInfo:
        current = self._objects.get(obj.id) if obj.id is not None else None
        if current is None:
            raise NotFoundError(type(obj).__name__, obj.id or obj.name)
        return current

    def _scope(self, obj: CatalogInfo) -> str | None:
        if isinstance(obj, (StoreInfo, LayerGroup, Style)):
            return obj.workspace.name if obj.workspace is not None else None
        if isinstance(obj, ResourceInfo):
            return obj.namespace.name if obj.namespace is not None else None
        if isinstance(obj, Layer) and obj.resource is not None:
            return self._scope(obj.resource)
        return None

    def _name_taken(self, obj: CatalogInfo) -> bool:
        family = next(
            (base for base in (Workspace, Namespace, StoreInfo, ResourceInfo, Layer, LayerGroup, Style)
             if isinstance(obj, base)),
            type(obj),
        )
        scope = self._scope(obj)
        return any(
            other is not obj
            and other.id != obj.id
            and isinstance(other, family)
            and other.name == obj.name
            and self._scope(other) == scope
            for other in self._objects.values()
        )

    def _apply_defaults(self, obj: CatalogInfo) -> None:
        if isinstance(obj, Workspace) and self._default_workspace is None:
            self._default_workspace = obj
        elif isinstance(obj, Namespace) and self._default_namespace is None:
            self._default_namespace = obj
        elif isinstance(obj, DataStore) and obj.workspace is not None:
            self._default_stores.setdefault(obj.workspace.id or obj.workspace.name, obj)

    def _replace_defaults(self, old: CatalogInfo, new: CatalogInfo) -> None:
        if old is self._default_workspace:
            self._default_workspace = new  # type: ignore[assignment]
        if old is self._default_namespace:
            self._default_namespace = new  # type: ignore[assignment]
        for ws_id, store in list(self._default_stores.items()):
            if store is old:
                self._default_stores[ws_id] = new  # type: ignore[assignment]


__all__ = ["InMemoryCatalog"]
