"""Testing generators – Hypothesis strategies for access decisions.

Requires the ``hypothesis`` package::

    pip install "secure-catalog[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from secure_catalog.kernel.query import EXCLUDE, INCLUDE
from secure_catalog.kernel.security import AccessContext, Principal, Role
from secure_catalog.security.limits import (
    CatalogMode,
    DataAccessLimits,
    VectorAccessLimits,
    WorkspaceAccessLimits,
)

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


_ROLES: tuple[str, ...] = ("ROLE_USER", "ROLE_EDITOR", "ROLE_AUTHENTICATED", "ROLE_ADMINISTRATOR")


def catalog_mode_strategy() -> "SearchStrategy[CatalogMode]":
    st = _require_hypothesis()
    return st.sampled_from(list(CatalogMode))


def workspace_limits_strategy() -> "SearchStrategy[WorkspaceAccessLimits]":
    """Any combination of readable / writable / adminable and mode."""
    st = _require_hypothesis()
    return st.builds(
        WorkspaceAccessLimits,
        mode=catalog_mode_strategy(),
        readable=st.booleans(),
        writable=st.booleans(),
        adminable=st.booleans(),
    )


def data_limits_strategy() -> "SearchStrategy[DataAccessLimits]":
    """Read-only data limits or vector limits, each allowing or denying."""
    st = _require_hypothesis()
    filters = st.sampled_from([INCLUDE, EXCLUDE])
    return st.one_of(
        st.builds(DataAccessLimits, mode=catalog_mode_strategy(), read_filter=filters),
        st.builds(
            VectorAccessLimits,
            mode=catalog_mode_strategy(),
            read_filter=filters,
            write_filter=st.sampled_from([INCLUDE, EXCLUDE, None]),
        ),
    )


def principal_strategy(roles: Sequence[str] = _ROLES) -> "SearchStrategy[Principal]":
    """Authenticated principals carrying any subset of *roles*."""
    st = _require_hypothesis()
    return st.builds(
        Principal,
        subject=st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=12),
        roles=st.frozensets(st.sampled_from(list(roles)).map(Role)),
    )


def access_context_strategy(
    request_kinds: Sequence[str | None] = (None, "GetMap", "GetCapabilities", "getcapabilities"),
) -> "SearchStrategy[AccessContext]":
    """Contexts with an optional principal, admin flag and request kind.

    Example::

        @given(access_context_strategy())
        def test_hidden_never_raises(ctx):
            ...
    """
    st = _require_hypothesis()
    return st.builds(
        AccessContext,
        principal=st.one_of(st.none(), principal_strategy()),
        admin_request=st.booleans(),
        request_kind=st.sampled_from(list(request_kinds)),
    )


__all__ = [
    "access_context_strategy",
    "catalog_mode_strategy",
    "data_limits_strategy",
    "principal_strategy",
    "workspace_limits_strategy",
]
