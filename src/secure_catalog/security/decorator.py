"""Object decoration — turn a resolved policy into original, view, or nothing."""
from __future__ import annotations

from typing import Any, TypeVar

from secure_catalog.catalog.model import (
    CatalogInfo,
    CoverageStore,
    Layer,
    LayerGroup,
    LayerGroupMode,
    Map,
    Namespace,
    ResourceInfo,
    StoreInfo,
    Style,
    WMSStore,
    Workspace,
)
from secure_catalog.config.validation import UnsupportedCatalogTypeError
from secure_catalog.kernel.security import AccessContext
from secure_catalog.observability.logging import get_logger
from secure_catalog.security.policy import AccessLevel, WrapperPolicy
from secure_catalog.security.resolver import PolicyResolver
from secure_catalog.security.unwrap import unwrap
from secure_catalog.security.views import SecuredLayerGroup, secure

T = TypeVar("T", bound=CatalogInfo)

_log = get_logger(__name__)


class ObjectDecorator:
    """Apply the resolver's verdict to a single catalog object.

    :meth:`decorate` returns the object itself when no restriction applies,
    a restricted view when one does, and ``None`` when the object is hidden.
    Unauthorized direct access in ``MIXED`` mode propagates as an error.
    """

    def __init__(self, resolver: PolicyResolver) -> None:
        self.resolver = resolver

    def decorate(self, ctx: AccessContext, obj: T | None) -> T | None:
        if obj is None:
            return None
        obj = unwrap(obj)
        if isinstance(obj, Map):
            return obj
        if isinstance(obj, LayerGroup):
            return self._decorate_group(ctx, obj)  # type: ignore[return-value]

        policy = self.resolver.resolve(ctx, obj)
        if policy.is_hidden:
            _log.debug("decorate.hidden", type=type(obj).__name__, name=obj.name)
            return None
        if self._unchanged(obj, policy):
            return obj
        return secure(obj, policy, ctx)

    @staticmethod
    def _unchanged(obj: CatalogInfo, policy: WrapperPolicy) -> bool:
        if isinstance(obj, (Workspace, Namespace, Style)):
            return True
        if isinstance(obj, StoreInfo):
            if isinstance(obj, WMSStore) or policy.level is AccessLevel.READ_WRITE:
                return True
            return isinstance(obj, CoverageStore) and policy.level is AccessLevel.READ_ONLY
        if isinstance(obj, (Layer, ResourceInfo)):
            return policy.is_unrestricted
        raise UnsupportedCatalogTypeError(obj, "decorate")

    # ------------------------------------------------------------------
    # Layer groups
    # ------------------------------------------------------------------

    def _decorate_group(self, ctx: AccessContext, group: LayerGroup) -> LayerGroup | None:
        policy = self.resolver.resolve(ctx, group)
        if policy.is_hidden:
            _log.debug("decorate.hidden", type="LayerGroup", name=group.name)
            return None

        changed = False
        root_layer = group.root_layer
        if group.mode is LayerGroupMode.EO and root_layer is not None:
            root_layer = self.decorate(ctx, root_layer)
            if root_layer is None:
                _log.debug("decorate.hidden_root", group=group.name)
                return None
            changed = root_layer is not group.root_layer

        aligned = len(group.styles) == len(group.layers)
        layers: list[Any] = []
        styles: list[Any] = []
        for index, member in enumerate(group.layers):
            decorated = self.decorate(ctx, member) if member is not None else None
            if decorated is None and member is not None:
                changed = True
                continue
            if decorated is not member:
                changed = True
            layers.append(decorated)
            if aligned:
                styles.append(group.styles[index])

        if not changed:
            return group
        if not aligned:
            styles = list(group.styles)
        return SecuredLayerGroup(group, policy, ctx, layers, styles, root_layer)  # type: ignore[return-value]


__all__ = ["ObjectDecorator"]
