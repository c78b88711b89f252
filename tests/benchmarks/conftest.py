"""conftest.py for benchmarks.

Provides a session-scoped catalog large enough to make per-object
resolution costs visible, and an access manager hiding half of it.
"""

from __future__ import annotations

import pytest

from secure_catalog.catalog import Layer, Workspace
from secure_catalog.kernel.query import EXCLUDE
from secure_catalog.security import DataAccessLimits, WorkspaceAccessLimits
from secure_catalog.testing import CatalogBuilder, FakeResourceAccessManager

WORKSPACES = 20
RESOURCES_PER_WORKSPACE = 25


@pytest.fixture(scope="session")
def large_catalog():
    """20 workspaces x 25 vector layers, plus one group per workspace."""
    builder = CatalogBuilder()
    for w in range(WORKSPACES):
        ws = f"ws{w:02d}"
        builder = builder.workspace(ws)
        for r in range(RESOURCES_PER_WORKSPACE):
            builder = builder.resource(ws, f"layer{r:02d}")
        builder = builder.group(
            f"{ws}_group",
            [f"{ws}:layer{r:02d}" for r in range(RESOURCES_PER_WORKSPACE)],
            workspace=ws,
        )
    return builder.build()


@pytest.fixture(scope="session")
def half_hidden_manager():
    """Odd layers unreadable in every workspace, every fourth workspace read-only."""
    manager = FakeResourceAccessManager()
    for r in range(1, RESOURCES_PER_WORKSPACE, 2):
        manager.set(Layer, f"layer{r:02d}", DataAccessLimits(read_filter=EXCLUDE))
    for w in range(0, WORKSPACES, 4):
        manager.set(Workspace, f"ws{w:02d}", WorkspaceAccessLimits(writable=False))
    return manager
