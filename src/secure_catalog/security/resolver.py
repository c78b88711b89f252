"""Policy resolution — from raw access limits to a :class:`WrapperPolicy`.

Every catalog variant reduces to three inputs, ``can_read``, ``can_write``
and the disclosure mode, which then go through a single decision table
(:meth:`PolicyResolver.disambiguate`):

==========  ===========  =======================  ==========================
can_read    can_write    mode                     policy
==========  ===========  =======================  ==========================
False       any          HIDE                     HIDDEN
False       any          MIXED, capabilities      HIDDEN
False       any          MIXED, other requests    raise unauthorized access
False       any          CHALLENGE                METADATA
True        False        HIDE                     READ_ONLY (response HIDE)
True        False        MIXED / CHALLENGE        READ_ONLY (response CHALLENGE)
True        True         any                      READ_WRITE
==========  ===========  =======================  ==========================

Derived objects are routed through their structural parents: namespaces
through the workspace sharing their prefix, stores through their workspace,
layers and resources through their own limits plus their workspace's
``adminable`` flag on admin requests.
"""
from __future__ import annotations

from secure_catalog.catalog.model import (
    CatalogInfo,
    Layer,
    LayerGroup,
    Map,
    Namespace,
    ResourceInfo,
    StoreInfo,
    Style,
    Workspace,
)
from secure_catalog.catalog.port import Catalog
from secure_catalog.config.validation import UnsupportedCatalogTypeError
from secure_catalog.kernel.security import AccessContext
from secure_catalog.observability.logging import get_logger
from secure_catalog.security.composite import GroupPolicyReducer
from secure_catalog.security.limits import (
    AccessLimits,
    CatalogMode,
    DataAccessLimits,
    ResourceAccessManager,
    VectorAccessLimits,
    WorkspaceAccessLimits,
)
from secure_catalog.security.policy import WrapperPolicy, unauthorized_access
from secure_catalog.security.settings import SecureCatalogSettings

_log = get_logger(__name__)


class PolicyResolver:
    """Resolve the :class:`WrapperPolicy` of a principal on a catalog object.

    Parameters
    ----------
    access_manager:
        Supplies raw :class:`AccessLimits` per principal and object.
    catalog:
        The *unsecured* catalog, used to find the workspace behind a
        namespace.
    settings:
        Disclosure defaults and the capabilities request names.
    """

    def __init__(
        self,
        access_manager: ResourceAccessManager,
        catalog: Catalog,
        settings: SecureCatalogSettings | None = None,
    ) -> None:
        self.access_manager = access_manager
        self.catalog = catalog
        self.settings = settings or SecureCatalogSettings()
        self.groups = GroupPolicyReducer(self)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def resolve_for(self, ctx: AccessContext, obj: CatalogInfo) -> WrapperPolicy:
        """Policy for any catalog object; layer groups get the composite policy.

        This is what other subsystems (capabilities documents, the query
        security predicate) call when they only need a yes/no/metadata
        answer.
        """
        if isinstance(obj, LayerGroup):
            return self.groups.resolve_policy_for_group(ctx, obj)
        return self.resolve(ctx, obj)

    def resolve(self, ctx: AccessContext, obj: CatalogInfo, name: str | None = None) -> WrapperPolicy:
        """Policy of *obj* on its own (layer groups without their members).

        *name* is the resource name reported in access errors; it defaults to
        the object's name.
        """
        name = name if name is not None else obj.name
        if isinstance(obj, Namespace):
            return self.resolve(ctx, self.workspace_for(obj), name)
        if isinstance(obj, StoreInfo):
            return self._resolve_workspace(ctx, obj.workspace, name)
        if isinstance(obj, Workspace):
            return self._resolve_workspace(ctx, obj, name)
        if isinstance(obj, (Layer, ResourceInfo)):
            return self._resolve_data(ctx, obj, name)
        if isinstance(obj, (Style, LayerGroup)):
            return self._resolve_styling(ctx, obj, name)
        if isinstance(obj, Map):
            return WrapperPolicy.read_write()
        raise UnsupportedCatalogTypeError(obj)

    def workspace_for(self, namespace: Namespace) -> Workspace:
        """The workspace paired with *namespace*.

        While a workspace/namespace rename is in flight the pair may not
        match; a transient workspace carrying the prefix stands in.
        """
        workspace = self.catalog.get_workspace_by_name(namespace.prefix)
        if workspace is None:
            workspace = Workspace(name=namespace.prefix)
        return workspace

    # ------------------------------------------------------------------
    # Per-variant inputs
    # ------------------------------------------------------------------

    def _resolve_workspace(self, ctx: AccessContext, workspace: Workspace | None, name: str) -> WrapperPolicy:
        limits = self._workspace_limits(ctx, workspace)
        can_read = can_write = True
        if limits is not None:
            if limits.adminable:
                can_read = can_write = True
            else:
                can_read, can_write = limits.readable, limits.writable
        if ctx.admin_request and (limits is None or not limits.adminable):
            can_read = can_write = False
        return self.disambiguate(ctx, can_read, can_write, limits, name)

    def _resolve_data(self, ctx: AccessContext, obj: Layer | ResourceInfo, name: str) -> WrapperPolicy:
        limits = self.access_manager.get_access_limits(ctx.principal, obj)
        if limits is not None and not isinstance(limits, DataAccessLimits):
            raise UnsupportedCatalogTypeError(limits, "interpret data access limits")
        ws_limits = self._workspace_limits(ctx, obj.workspace)
        can_read = can_write = True
        if limits is not None:
            can_read = limits.can_read
            can_write = limits.can_write if isinstance(limits, VectorAccessLimits) else False
        if ctx.admin_request and ws_limits is not None and not ws_limits.adminable:
            can_read = False
        return self.disambiguate(ctx, can_read, can_write, limits, name)

    def _resolve_styling(self, ctx: AccessContext, obj: Style | LayerGroup, name: str) -> WrapperPolicy:
        limits = self.access_manager.get_access_limits(ctx.principal, obj)
        can_read = limits is None
        if obj.workspace is not None and ctx.admin_request:
            ws_limits = self._workspace_limits(ctx, obj.workspace)
            if ws_limits is not None and not ws_limits.adminable:
                can_read = False
        return self.disambiguate(ctx, can_read, True, limits, name)

    def _workspace_limits(self, ctx: AccessContext, workspace: Workspace | None) -> WorkspaceAccessLimits | None:
        if workspace is None:
            return None
        limits = self.access_manager.get_access_limits(ctx.principal, workspace)
        if limits is not None and not isinstance(limits, WorkspaceAccessLimits):
            raise UnsupportedCatalogTypeError(limits, "interpret workspace access limits")
        return limits

    # ------------------------------------------------------------------
    # Decision table
    # ------------------------------------------------------------------

    def disambiguate(
        self,
        ctx: AccessContext,
        can_read: bool,
        can_write: bool,
        limits: AccessLimits | None,
        name: str,
    ) -> WrapperPolicy:
        mode = limits.mode if limits is not None else self.settings.catalog_mode
        if not can_read:
            if mode is CatalogMode.HIDE:
                policy = WrapperPolicy.hide(limits)
            elif mode is CatalogMode.MIXED:
                if not ctx.is_capabilities_request(self.settings.capabilities_requests):
                    _log.info("policy.challenged", resource=name, mode=mode.value)
                    raise unauthorized_access(ctx, name)
                policy = WrapperPolicy.hide(limits)
            else:
                policy = WrapperPolicy.metadata(limits)
        elif not can_write:
            if mode is CatalogMode.HIDE:
                policy = WrapperPolicy.read_only_hide(limits)
            else:
                policy = WrapperPolicy.read_only_challenge(limits)
        else:
            policy = WrapperPolicy.read_write(limits)
        _log.debug("policy.resolved", resource=name, access_level=policy.level.value, mode=mode.value)
        return policy


__all__ = ["PolicyResolver"]
