"""Secured catalog facade.

:class:`SecureCatalog` decorates another :class:`Catalog`. It overrides
the query core, the defaults and the mutations; every typed accessor
inherited from the port (``get_layer_by_name``, ``get_stores_by_workspace``
...) is built on that core and is therefore secured as well. The typed
layer-group accessors are overridden too: they drop hidden members instead
of hiding the whole group.
"""
from __future__ import annotations

from typing import Callable, Iterator, TypeVar

from secure_catalog.catalog.model import CatalogInfo, DataStore, LayerGroup, Namespace, Workspace
from secure_catalog.catalog.port import Catalog, SortBy
from secure_catalog.kernel.errors import ValidationError
from secure_catalog.kernel.query import INCLUDE, BaseSpecification
from secure_catalog.kernel.security import AccessContext
from secure_catalog.observability.logging import get_logger
from secure_catalog.security.decorator import ObjectDecorator
from secure_catalog.security.filtering import CollectionFilter
from secure_catalog.security.limits import ResourceAccessManager
from secure_catalog.security.resolver import PolicyResolver
from secure_catalog.security.settings import SecureCatalogSettings
from secure_catalog.security.unwrap import unwrap

T = TypeVar("T", bound=CatalogInfo)

_log = get_logger(__name__)


class SecureCatalog(Catalog):
    """Catalog that only hands out what the current caller may see.

    Parameters
    ----------
    delegate:
        The unsecured catalog.
    access_manager:
        Source of the raw access limits.
    settings:
        Defaults to :class:`SecureCatalogSettings` with built-in values.
    context_provider:
        Returns the :class:`AccessContext` of the current call; defaults to a
        snapshot of the ambient security context and request scope.

    Example::

        secured = SecureCatalog(InMemoryCatalog(), manager)
        with SecurityContext.as_principal(Principal.of("bob", "ROLE_USER")):
            layers = secured.get_layers()
    """

    def __init__(
        self,
        delegate: Catalog,
        access_manager: ResourceAccessManager,
        settings: SecureCatalogSettings | None = None,
        context_provider: Callable[[], AccessContext] | None = None,
    ) -> None:
        self._delegate = delegate
        self.resolver = PolicyResolver(access_manager, delegate, settings)
        self.decorator = ObjectDecorator(self.resolver)
        self.collection_filter = CollectionFilter(self.decorator)
        self._context_provider = context_provider or AccessContext.from_ambient

    @property
    def delegate(self) -> Catalog:
        return self._delegate

    @property
    def settings(self) -> SecureCatalogSettings:
        return self.resolver.settings

    def unwrap(self) -> Catalog:
        return self._delegate

    def current_context(self) -> AccessContext:
        return self._context_provider()

    # ------------------------------------------------------------------
    # Query core
    # ------------------------------------------------------------------

    def get_by_id(self, of: type[T], id: str) -> T | None:
        ctx = self.current_context()
        return self.decorator.decorate(ctx, self._delegate.get_by_id(of, id))

    def list(
        self,
        of: type[T],
        filter: BaseSpecification = INCLUDE,
        offset: int | None = None,
        count: int | None = None,
        sort_by: SortBy | None = None,
    ) -> Iterator[T]:
        """Lazily decorated listing; the context is captured on call."""
        ctx = self.current_context()
        secured = self.collection_filter.security_filter(ctx, of, filter)
        items = self._delegate.list(of, secured, offset=offset, count=count, sort_by=sort_by)
        return self.collection_filter.iter_filter(ctx, items)

    def count(self, of: type[T], filter: BaseSpecification = INCLUDE) -> int:
        ctx = self.current_context()
        return self._delegate.count(of, self.collection_filter.security_filter(ctx, of, filter))

    # ------------------------------------------------------------------
    # Layer groups
    # ------------------------------------------------------------------

    # Typed group accessors decorate member by member; only the generic
    # query core hides a group as a whole when one of its members is hidden.

    def get_layer_group_by_name(
        self, name: str, workspace: Workspace | str | None = None
    ) -> LayerGroup | None:
        group = self._delegate.get_layer_group_by_name(name, unwrap(workspace))
        return self.decorator.decorate(self.current_context(), group)

    def get_layer_groups(self) -> list[LayerGroup]:
        return self.collection_filter.filter(self.current_context(), self._delegate.get_layer_groups())

    def get_layer_groups_by_workspace(self, workspace: Workspace | str) -> list[LayerGroup]:
        groups = self._delegate.get_layer_groups_by_workspace(unwrap(workspace))
        return self.collection_filter.filter(self.current_context(), groups)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, obj: CatalogInfo) -> None:
        self._delegate.add(self._unwrapped("add", obj))

    def save(self, obj: CatalogInfo) -> None:
        self._delegate.save(self._unwrapped("save", obj))

    def remove(self, obj: CatalogInfo) -> None:
        self._delegate.remove(self._unwrapped("remove", obj))

    def validate(self, obj: CatalogInfo, is_new: bool) -> list[ValidationError]:
        return self._delegate.validate(unwrap(obj), is_new)

    def detach(self, obj: T) -> T:
        ctx = self.current_context()
        return self.decorator.decorate(ctx, self._delegate.detach(unwrap(obj)))  # type: ignore[return-value]

    @staticmethod
    def _unwrapped(operation: str, obj: CatalogInfo) -> CatalogInfo:
        original = unwrap(obj)
        if original is not obj:
            _log.debug("secure_catalog.unwrapped", operation=operation, type=type(original).__name__, name=original.name)
        return original

    # ------------------------------------------------------------------
    # Defaults
    # ------------------------------------------------------------------

    def get_default_workspace(self) -> Workspace | None:
        return self.decorator.decorate(self.current_context(), self._delegate.get_default_workspace())

    def set_default_workspace(self, workspace: Workspace | None) -> None:
        self._delegate.set_default_workspace(unwrap(workspace))

    def get_default_namespace(self) -> Namespace | None:
        return self.decorator.decorate(self.current_context(), self._delegate.get_default_namespace())

    def set_default_namespace(self, namespace: Namespace | None) -> None:
        self._delegate.set_default_namespace(unwrap(namespace))

    def get_default_data_store(self, workspace: Workspace) -> DataStore | None:
        ctx = self.current_context()
        return self.decorator.decorate(ctx, self._delegate.get_default_data_store(unwrap(workspace)))

    def set_default_data_store(self, workspace: Workspace, store: DataStore | None) -> None:
        self._delegate.set_default_data_store(unwrap(workspace), unwrap(store))

    def __repr__(self) -> str:
        return f"SecureCatalog({self._delegate!r})"


__all__ = ["SecureCatalog"]
