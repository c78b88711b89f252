"""Unit tests for PolicyResolver — the per-variant inputs and the decision table."""

from __future__ import annotations

import pytest

from secure_catalog.catalog import (
    CatalogInfo,
    DataStore,
    FeatureType,
    InMemoryCatalog,
    Layer,
    Map,
    Namespace,
    Style,
    Workspace,
)
from secure_catalog.config.validation import UnsupportedCatalogTypeError
from secure_catalog.kernel.errors import ForbiddenError, UnauthorizedError
from secure_catalog.kernel.query import EXCLUDE, INCLUDE
from secure_catalog.kernel.security import AccessContext, Principal
from secure_catalog.security import (
    AccessLevel,
    CatalogMode,
    DataAccessLimits,
    PolicyResolver,
    Response,
    SecureCatalogSettings,
    StyleAccessLimits,
    VectorAccessLimits,
    WorkspaceAccessLimits,
)
from secure_catalog.testing import FakeResourceAccessManager

BOB = AccessContext(principal=Principal.of("bob", "ROLE_USER"))
ANON = AccessContext()


@pytest.fixture
def resolver(sample_catalog: InMemoryCatalog, access_manager: FakeResourceAccessManager) -> PolicyResolver:
    return PolicyResolver(access_manager, sample_catalog)


def _ws(catalog: InMemoryCatalog, name: str = "topp") -> Workspace:
    ws = catalog.get_workspace_by_name(name)
    assert ws is not None
    return ws


def _layer(catalog: InMemoryCatalog, name: str = "topp:states") -> Layer:
    layer = catalog.get_layer_by_name(name)
    assert layer is not None
    return layer


# ---------------------------------------------------------------------------
# Decision table
# ---------------------------------------------------------------------------


class TestDisambiguate:
    @pytest.mark.parametrize(
        ("can_read", "can_write", "mode", "level", "response"),
        [
            (False, False, CatalogMode.HIDE, AccessLevel.HIDDEN, Response.HIDE),
            (False, True, CatalogMode.CHALLENGE, AccessLevel.METADATA, Response.CHALLENGE),
            (True, False, CatalogMode.HIDE, AccessLevel.READ_ONLY, Response.HIDE),
            (True, False, CatalogMode.MIXED, AccessLevel.READ_ONLY, Response.CHALLENGE),
            (True, False, CatalogMode.CHALLENGE, AccessLevel.READ_ONLY, Response.CHALLENGE),
            (True, True, CatalogMode.HIDE, AccessLevel.READ_WRITE, Response.HIDE),
            (True, True, CatalogMode.MIXED, AccessLevel.READ_WRITE, Response.HIDE),
            (True, True, CatalogMode.CHALLENGE, AccessLevel.READ_WRITE, Response.HIDE),
        ],
    )
    def test_table(self, resolver: PolicyResolver, can_read, can_write, mode, level, response) -> None:
        limits = DataAccessLimits(mode=mode)
        policy = resolver.disambiguate(BOB, can_read, can_write, limits, "states")
        assert policy.level is level
        assert policy.response is response
        assert policy.limits is limits

    def test_mixed_unreadable_challenges_authenticated(self, resolver: PolicyResolver) -> None:
        with pytest.raises(ForbiddenError) as exc_info:
            resolver.disambiguate(BOB, False, False, DataAccessLimits(mode=CatalogMode.MIXED), "states")
        assert exc_info.value.resource == "states"

    def test_mixed_unreadable_challenges_anonymous(self, resolver: PolicyResolver) -> None:
        with pytest.raises(UnauthorizedError):
            resolver.disambiguate(ANON, False, False, DataAccessLimits(mode=CatalogMode.MIXED), "states")

    def test_mixed_unreadable_hidden_in_capabilities(self, resolver: PolicyResolver) -> None:
        ctx = AccessContext(principal=BOB.principal, request_kind="GETCAPABILITIES")
        policy = resolver.disambiguate(ctx, False, False, DataAccessLimits(mode=CatalogMode.MIXED), "states")
        assert policy.is_hidden

    def test_absent_limits_use_default_mode(self, sample_catalog, access_manager) -> None:
        settings = SecureCatalogSettings(default_mode="CHALLENGE")
        resolver = PolicyResolver(access_manager, sample_catalog, settings)
        assert resolver.disambiguate(BOB, False, False, None, "x").level is AccessLevel.METADATA


# ---------------------------------------------------------------------------
# Workspaces, namespaces and stores
# ---------------------------------------------------------------------------


class TestWorkspaceRouting:
    def test_no_limits_is_read_write(self, resolver: PolicyResolver, sample_catalog) -> None:
        assert resolver.resolve(BOB, _ws(sample_catalog)).is_unrestricted

    def test_unreadable_workspace_hides_namespace_and_stores(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Workspace, "topp", WorkspaceAccessLimits(readable=False))
        ns = sample_catalog.get_namespace_by_prefix("topp")
        store = sample_catalog.get_store_by_name("topp_vector", "topp")
        assert resolver.resolve(BOB, _ws(sample_catalog)).is_hidden
        assert resolver.resolve(BOB, ns).is_hidden
        assert resolver.resolve(BOB, store).is_hidden
        assert resolver.resolve(BOB, _ws(sample_catalog, "sf")).is_unrestricted

    def test_read_only_workspace(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Workspace, "topp", WorkspaceAccessLimits(writable=False, mode=CatalogMode.CHALLENGE))
        policy = resolver.resolve(BOB, _ws(sample_catalog))
        assert policy.level is AccessLevel.READ_ONLY
        assert policy.response is Response.CHALLENGE

    def test_adminable_overrides_flags(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Workspace, "topp", WorkspaceAccessLimits(readable=False, writable=False, adminable=True))
        admin_ctx = AccessContext(principal=BOB.principal, admin_request=True)
        assert resolver.resolve(BOB, _ws(sample_catalog)).level is AccessLevel.READ_WRITE
        assert resolver.resolve(admin_ctx, _ws(sample_catalog)).level is AccessLevel.READ_WRITE

    def test_admin_request_needs_adminable(self, resolver, sample_catalog, access_manager) -> None:
        admin_ctx = AccessContext(principal=BOB.principal, admin_request=True)
        assert resolver.resolve(admin_ctx, _ws(sample_catalog, "sf")).is_hidden
        access_manager.set(Workspace, "topp", WorkspaceAccessLimits(mode=CatalogMode.CHALLENGE))
        assert resolver.resolve(admin_ctx, _ws(sample_catalog)).level is AccessLevel.METADATA

    def test_namespace_without_workspace_uses_prefix(self, resolver, access_manager) -> None:
        access_manager.set(Workspace, "ghost", WorkspaceAccessLimits(readable=False))
        assert resolver.resolve(BOB, Namespace(name="ghost")).is_hidden
        assert (("bob", "Workspace", "ghost")) in access_manager.calls

    def test_mixed_namespace_reports_namespace_name(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Workspace, "topp", WorkspaceAccessLimits(readable=False, mode=CatalogMode.MIXED))
        with pytest.raises(ForbiddenError) as exc_info:
            resolver.resolve(BOB, sample_catalog.get_namespace_by_prefix("topp"))
        assert exc_info.value.resource == "topp"

    def test_wrong_limits_type_for_workspace(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Workspace, "topp", DataAccessLimits())
        with pytest.raises(UnsupportedCatalogTypeError):
            resolver.resolve(BOB, _ws(sample_catalog))

    def test_store_without_workspace(self, resolver) -> None:
        assert resolver.resolve(BOB, DataStore(name="loose")).is_unrestricted


# ---------------------------------------------------------------------------
# Layers and resources
# ---------------------------------------------------------------------------


class TestDataRouting:
    def test_no_limits(self, resolver, sample_catalog) -> None:
        assert resolver.resolve(BOB, _layer(sample_catalog)).is_unrestricted

    def test_unreadable_layer(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Layer, "states", DataAccessLimits(read_filter=EXCLUDE))
        assert resolver.resolve(BOB, _layer(sample_catalog)).is_hidden

    def test_non_vector_limits_are_read_only(self, resolver, sample_catalog, access_manager) -> None:
        limits = DataAccessLimits(read_filter=INCLUDE)
        access_manager.set(Layer, "arc_sample", limits)
        policy = resolver.resolve(BOB, _layer(sample_catalog, "nurc:arc_sample"))
        assert policy.level is AccessLevel.READ_ONLY
        assert policy.limits is limits

    def test_writable_vector_keeps_limits(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Layer, "states", VectorAccessLimits())
        policy = resolver.resolve(BOB, _layer(sample_catalog))
        assert policy.level is AccessLevel.READ_WRITE
        assert policy.is_unrestricted is False

    def test_unwritable_vector_challenge(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Layer, "states", VectorAccessLimits(write_filter=EXCLUDE, mode=CatalogMode.CHALLENGE))
        policy = resolver.resolve(BOB, _layer(sample_catalog))
        assert (policy.level, policy.response) == (AccessLevel.READ_ONLY, Response.CHALLENGE)

    def test_resource_uses_its_own_limits(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(FeatureType, "states", DataAccessLimits(read_filter=EXCLUDE, mode=CatalogMode.CHALLENGE))
        resource = sample_catalog.get_resource_by_name("topp:states")
        assert resolver.resolve(BOB, resource).level is AccessLevel.METADATA
        assert resolver.resolve(BOB, _layer(sample_catalog)).is_unrestricted

    def test_wrong_limits_type_for_layer(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Layer, "states", StyleAccessLimits())
        with pytest.raises(UnsupportedCatalogTypeError) as exc_info:
            resolver.resolve(BOB, _layer(sample_catalog))
        assert exc_info.value.object_type is StyleAccessLimits

    def test_admin_request_in_non_adminable_workspace(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Workspace, "topp", WorkspaceAccessLimits())
        admin_ctx = AccessContext(principal=BOB.principal, admin_request=True)
        assert resolver.resolve(admin_ctx, _layer(sample_catalog)).is_hidden
        assert resolver.resolve(BOB, _layer(sample_catalog)).is_unrestricted

    def test_admin_request_without_workspace_limits(self, resolver, sample_catalog) -> None:
        admin_ctx = AccessContext(principal=BOB.principal, admin_request=True)
        assert resolver.resolve(admin_ctx, _layer(sample_catalog)).is_unrestricted

    def test_per_principal_limits(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Layer, "states", DataAccessLimits(read_filter=EXCLUDE), subject="bob")
        alice = AccessContext(principal=Principal.of("alice", "ROLE_USER"))
        assert resolver.resolve(BOB, _layer(sample_catalog)).is_hidden
        assert resolver.resolve(alice, _layer(sample_catalog)).is_unrestricted


# ---------------------------------------------------------------------------
# Styles, groups, maps, unknown types
# ---------------------------------------------------------------------------


class TestOtherVariants:
    def test_style_without_limits(self, resolver, sample_catalog) -> None:
        assert resolver.resolve(BOB, sample_catalog.get_style_by_name("polygon")).level is AccessLevel.READ_WRITE

    def test_style_limits_hide(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Style, "polygon", StyleAccessLimits())
        assert resolver.resolve(BOB, sample_catalog.get_style_by_name("polygon")).is_hidden

    def test_style_limits_challenge(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Style, "polygon", StyleAccessLimits(mode=CatalogMode.CHALLENGE))
        assert resolver.resolve(BOB, sample_catalog.get_style_by_name("polygon")).level is AccessLevel.METADATA

    def test_workspace_style_on_admin_request(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Workspace, "topp", WorkspaceAccessLimits())
        admin_ctx = AccessContext(principal=BOB.principal, admin_request=True)
        assert resolver.resolve(admin_ctx, sample_catalog.get_style_by_name("topp_style", "topp")).is_hidden
        assert resolver.resolve(admin_ctx, sample_catalog.get_style_by_name("polygon")).level is AccessLevel.READ_WRITE

    def test_map_is_always_read_write(self, resolver) -> None:
        assert resolver.resolve(ANON, Map(name="m")).is_unrestricted

    def test_unknown_type_fails(self, resolver) -> None:
        with pytest.raises(UnsupportedCatalogTypeError) as exc_info:
            resolver.resolve(BOB, CatalogInfo(name="mystery"))
        assert exc_info.value.object_type is CatalogInfo

    def test_resolve_for_routes_groups_to_reducer(self, resolver, sample_catalog, access_manager) -> None:
        access_manager.set(Layer, "roads", DataAccessLimits(read_filter=EXCLUDE))
        world = sample_catalog.get_layer_group_by_name("world")
        assert resolver.resolve(BOB, world).is_unrestricted
        assert resolver.resolve_for(BOB, world).is_hidden
