"""Composite policies for layer groups (most-restrictive-wins)."""
from __future__ import annotations

from typing import TYPE_CHECKING

from secure_catalog.catalog.model import LayerGroup
from secure_catalog.kernel.security import AccessContext
from secure_catalog.security.policy import WrapperPolicy

if TYPE_CHECKING:
    from secure_catalog.security.resolver import PolicyResolver


class GroupPolicyReducer:
    """Reduce the policies of a group's members to one effective policy.

    The reduction answers "may this group be shown at all, and how
    restricted is it"; it does not replace the group's own policy when the
    group object itself is decorated.
    """

    def __init__(self, resolver: "PolicyResolver") -> None:
        self._resolver = resolver

    def resolve_policy_for_group(self, ctx: AccessContext, group: LayerGroup) -> WrapperPolicy:
        own = self._resolver.resolve(ctx, group)
        if own.is_hidden:
            return own

        most_restrictive = WrapperPolicy.read_write()
        for member in group.layers:
            if member is None:
                continue
            policy = self._resolver.resolve_for(ctx, member)
            if policy.is_hidden:
                return policy
            if policy.is_more_restrictive_than(most_restrictive):
                most_restrictive = policy
        return most_restrictive


__all__ = ["GroupPolicyReducer"]
