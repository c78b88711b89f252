"""Catalog port — the storage collaborator the security layer decorates.

Implementations provide the small query/mutation core; every typed read
accessor is derived from it here so that a decorator overriding the core
automatically secures the whole surface.
"""
from __future__ import annotations

import abc
import dataclasses
from typing import Iterator, TypeVar

from secure_catalog.catalog.model import (
    CatalogInfo,
    DataStore,
    Layer,
    LayerGroup,
    Map,
    Namespace,
    ResourceInfo,
    StoreInfo,
    Style,
    Workspace,
)
from secure_catalog.kernel.errors import ConflictError, ValidationError
from secure_catalog.kernel.query import (
    INCLUDE,
    BaseSpecification,
    and_,
    equal,
    is_null,
    or_,
)

T = TypeVar("T", bound=CatalogInfo)
TStore = TypeVar("TStore", bound=StoreInfo)
TResource = TypeVar("TResource", bound=ResourceInfo)


@dataclasses.dataclass(frozen=True)
class SortBy:
    """Sort on a dotted property path."""
    property: str
    ascending: bool = True


def _name_of(ref: CatalogInfo | str | None) -> str | None:
    if ref is None or isinstance(ref, str):
        return ref
    return ref.name


def _split_prefixed(name: str) -> tuple[str | None, str]:
    if ":" in name:
        prefix, _, local = name.partition(":")
        return prefix, local
    return None, name


class Catalog(abc.ABC):
    """Port: catalog storage.

    Abstract core: :meth:`get_by_id`, :meth:`list`, :meth:`count`, the
    mutations, and the defaults. ``filter`` arguments are
    :class:`~secure_catalog.kernel.query.BaseSpecification` instances.
    """

    # ------------------------------------------------------------------
    # Query core
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def get_by_id(self, of: type[T], id: str) -> T | None: ...

    @abc.abstractmethod
    def list(
        self,
        of: type[T],
        filter: BaseSpecification = INCLUDE,
        offset: int | None = None,
        count: int | None = None,
        sort_by: SortBy | None = None,
    ) -> Iterator[T]: ...

    @abc.abstractmethod
    def count(self, of: type[T], filter: BaseSpecification = INCLUDE) -> int: ...

    def get(self, of: type[T], filter: BaseSpecification) -> T | None:
        """The single object of type *of* matching *filter*, or ``None``.

        Raises :class:`ConflictError` when more than one object matches.
        """
        found = [obj for obj in self.list(of, filter, count=2)]
        if len(found) > 1:
            raise ConflictError(
                f"Filter {filter!r} matches more than one {of.__name__}",
                detail={"type": of.__name__},
            )
        return found[0] if found else None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def add(self, obj: CatalogInfo) -> None: ...

    @abc.abstractmethod
    def save(self, obj: CatalogInfo) -> None: ...

    @abc.abstractmethod
    def remove(self, obj: CatalogInfo) -> None: ...

    @abc.abstractmethod
    def validate(self, obj: CatalogInfo, is_new: bool) -> list[ValidationError]: ...

    @abc.abstractmethod
    def detach(self, obj: T) -> T: ...

    # ------------------------------------------------------------------
    # Defaults
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def get_default_workspace(self) -> Workspace | None: ...

    @abc.abstractmethod
    def set_default_workspace(self, workspace: Workspace | None) -> None: ...

    @abc.abstractmethod
    def get_default_namespace(self) -> Namespace | None: ...

    @abc.abstractmethod
    def set_default_namespace(self, namespace: Namespace | None) -> None: ...

    @abc.abstractmethod
    def get_default_data_store(self, workspace: Workspace) -> DataStore | None: ...

    @abc.abstractmethod
    def set_default_data_store(self, workspace: Workspace, store: DataStore | None) -> None: ...

    # ------------------------------------------------------------------
    # Workspaces and namespaces
    # ------------------------------------------------------------------

    def get_workspace(self, id: str) -> Workspace | None:
        return self.get_by_id(Workspace, id)

    def get_workspace_by_name(self, name: str) -> Workspace | None:
        return self.get(Workspace, equal("name", name))

    def get_workspaces(self) -> list[Workspace]:
        return list(self.list(Workspace))

    def get_namespace(self, id: str) -> Namespace | None:
        return self.get_by_id(Namespace, id)

    def get_namespace_by_prefix(self, prefix: str) -> Namespace | None:
        return self.get(Namespace, equal("name", prefix))

    def get_namespace_by_uri(self, uri: str) -> Namespace | None:
        return self.get(Namespace, equal("uri", uri))

    def get_namespaces(self) -> list[Namespace]:
        return list(self.list(Namespace))

    # ------------------------------------------------------------------
    # Stores
    # ------------------------------------------------------------------

    def get_store(self, id: str, of: type[TStore] = StoreInfo) -> TStore | None:  # type: ignore[assignment]
        return self.get_by_id(of, id)

    def get_store_by_name(
        self,
        name: str,
        workspace: Workspace | str | None = None,
        of: type[TStore] = StoreInfo,  # type: ignore[assignment]
    ) -> TStore | None:
        """Store named *name*; without a workspace the default one wins ties."""
        ws_name = _name_of(workspace)
        if ws_name is not None:
            return self.get(of, and_(equal("name", name), equal("workspace.name", ws_name)))
        candidates = list(self.list(of, equal("name", name)))
        if len(candidates) > 1:
            default = self.get_default_workspace()
            for store in candidates:
                if default is not None and store.workspace is not None and store.workspace.name == default.name:
                    return store
        return candidates[0] if candidates else None

    def get_stores(self, of: type[TStore] = StoreInfo) -> list[TStore]:  # type: ignore[assignment]
        return list(self.list(of))

    def get_stores_by_workspace(
        self, workspace: Workspace | str, of: type[TStore] = StoreInfo  # type: ignore[assignment]
    ) -> list[TStore]:
        return list(self.list(of, equal("workspace.name", _name_of(workspace))))

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    def get_resource(self, id: str, of: type[TResource] = ResourceInfo) -> TResource | None:  # type: ignore[assignment]
        return self.get_by_id(of, id)

    def get_resource_by_name(
        self,
        name: str,
        namespace: Namespace | str | None = None,
        of: type[TResource] = ResourceInfo,  # type: ignore[assignment]
    ) -> TResource | None:
        """Resource by local or ``prefix:name`` qualified name."""
        prefix, local = _split_prefixed(name)
        prefix = _name_of(namespace) or prefix
        if prefix is not None:
            return self.get(of, and_(equal("name", local), equal("namespace.name", prefix)))
        candidates = list(self.list(of, equal("name", local)))
        if len(candidates) > 1:
            default = self.get_default_namespace()
            for resource in candidates:
                if default is not None and resource.namespace is not None and resource.namespace.name == default.name:
                    return resource
        return candidates[0] if candidates else None

    def get_resources(self, of: type[TResource] = ResourceInfo) -> list[TResource]:  # type: ignore[assignment]
        return list(self.list(of))

    def get_resources_by_namespace(
        self, namespace: Namespace | str, of: type[TResource] = ResourceInfo  # type: ignore[assignment]
    ) -> list[TResource]:
        return list(self.list(of, equal("namespace.name", _name_of(namespace))))

    def get_resources_by_store(
        self, store: StoreInfo, of: type[TResource] = ResourceInfo  # type: ignore[assignment]
    ) -> list[TResource]:
        return list(self.list(of, equal("store.id", store.id)))

    def get_resource_by_store(
        self, store: StoreInfo, name: str, of: type[TResource] = ResourceInfo  # type: ignore[assignment]
    ) -> TResource | None:
        return self.get(of, and_(equal("store.id", store.id), equal("name", name)))

    # ------------------------------------------------------------------
    # Layers and layer groups
    # ------------------------------------------------------------------

    def get_layer(self, id: str) -> Layer | None:
        return self.get_by_id(Layer, id)

    def get_layer_by_name(self, name: str) -> Layer | None:
        prefix, local = _split_prefixed(name)
        if prefix is not None:
            return self.get(Layer, and_(equal("name", local), equal("resource.namespace.name", prefix)))
        return next(iter(self.list(Layer, equal("name", local))), None)

    def get_layers(self) -> list[Layer]:
        return list(self.list(Layer))

    def get_layers_by_resource(self, resource: ResourceInfo) -> list[Layer]:
        return list(self.list(Layer, equal("resource.id", resource.id)))

    def get_layers_by_style(self, style: Style) -> list[Layer]:
        return list(self.list(Layer, or_(equal("default_style.id", style.id), equal("styles.id", style.id))))

    def get_layer_group(self, id: str) -> LayerGroup | None:
        return self.get_by_id(LayerGroup, id)

    def get_layer_group_by_name(
        self, name: str, workspace: Workspace | str | None = None
    ) -> LayerGroup | None:
        prefix, local = _split_prefixed(name)
        ws_name = _name_of(workspace) or prefix
        scope = equal("workspace.name", ws_name) if ws_name is not None else is_null("workspace")
        return self.get(LayerGroup, and_(equal("name", local), scope))

    def get_layer_groups(self) -> list[LayerGroup]:
        return list(self.list(LayerGroup))

    def get_layer_groups_by_workspace(self, workspace: Workspace | str) -> list[LayerGroup]:
        return list(self.list(LayerGroup, equal("workspace.name", _name_of(workspace))))

    # ------------------------------------------------------------------
    # Styles and maps
    # ------------------------------------------------------------------

    def get_style(self, id: str) -> Style | None:
        return self.get_by_id(Style, id)

    def get_style_by_name(self, name: str, workspace: Workspace | str | None = None) -> Style | None:
        ws_name = _name_of(workspace)
        scope = equal("workspace.name", ws_name) if ws_name is not None else is_null("workspace")
        return self.get(Style, and_(equal("name", name), scope))

    def get_styles(self) -> list[Style]:
        return list(self.list(Style))

    def get_styles_by_workspace(self, workspace: Workspace | str) -> list[Style]:
        return list(self.list(Style, equal("workspace.name", _name_of(workspace))))

    def get_map(self, id: str) -> Map | None:
        return self.get_by_id(Map, id)

    def get_map_by_name(self, name: str) -> Map | None:
        return self.get(Map, equal("name", name))

    def get_maps(self) -> list[Map]:
        return list(self.list(Map))


__all__ = ["Catalog", "SortBy"]
