"""Wrapper policies — the resolved outcome of an authorization decision."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterable

from secure_catalog.kernel.errors import ApplicationError, ForbiddenError, UnauthorizedError
from secure_catalog.kernel.security import AccessContext
from secure_catalog.security.limits import AccessLimits


class AccessLevel(str, Enum):
    """What a principal may do with a catalog object.

    Declared from most to least restrictive; :attr:`rank` exposes that order.
    ``METADATA`` ranking below ``READ_ONLY`` is a fixed tie-break, not a claim
    that one is a subset of the other.
    """

    HIDDEN = "HIDDEN"
    METADATA = "METADATA"
    READ_ONLY = "READ_ONLY"
    READ_WRITE = "READ_WRITE"

    @property
    def rank(self) -> int:
        return _RANK[self]


_RANK = {level: i for i, level in enumerate(AccessLevel)}


class Response(str, Enum):
    """How an attempt to exceed a read-only view fails."""

    #: Locally: writes are absorbed by the view, write operations are absent.
    HIDE = "HIDE"
    #: Loudly: the unauthorized-access error is raised.
    CHALLENGE = "CHALLENGE"


@dataclasses.dataclass(frozen=True)
class WrapperPolicy:
    """Access level plus the raw limits that produced it."""

    level: AccessLevel
    limits: AccessLimits | None = None
    response: Response = Response.HIDE

    @classmethod
    def hide(cls, limits: AccessLimits | None = None) -> "WrapperPolicy":
        return cls(AccessLevel.HIDDEN, limits, Response.HIDE)

    @classmethod
    def metadata(cls, limits: AccessLimits | None = None) -> "WrapperPolicy":
        return cls(AccessLevel.METADATA, limits, Response.CHALLENGE)

    @classmethod
    def read_only_hide(cls, limits: AccessLimits | None = None) -> "WrapperPolicy":
        return cls(AccessLevel.READ_ONLY, limits, Response.HIDE)

    @classmethod
    def read_only_challenge(cls, limits: AccessLimits | None = None) -> "WrapperPolicy":
        return cls(AccessLevel.READ_ONLY, limits, Response.CHALLENGE)

    @classmethod
    def read_write(cls, limits: AccessLimits | None = None) -> "WrapperPolicy":
        return cls(AccessLevel.READ_WRITE, limits, Response.HIDE)

    @property
    def is_hidden(self) -> bool:
        return self.level is AccessLevel.HIDDEN

    @property
    def is_unrestricted(self) -> bool:
        """``READ_WRITE`` without attached limits: no wrapping needed."""
        return self.level is AccessLevel.READ_WRITE and self.limits is None

    def is_more_restrictive_than(self, other: "WrapperPolicy") -> bool:
        return self.level.rank < other.level.rank


def unauthorized_access(ctx: AccessContext, resource_name: str | None = None) -> ApplicationError:
    """Error for a denied direct access.

    Anonymous callers (no principal or no authorities) get
    :class:`UnauthorizedError` so they can be asked for credentials; everyone
    else gets :class:`ForbiddenError`.
    """
    if ctx.is_anonymous:
        if resource_name is None:
            return UnauthorizedError("Operation unallowed with the current privileges")
        return UnauthorizedError(f"Cannot access {resource_name} as anonymous", resource=resource_name)
    if resource_name is None:
        return ForbiddenError("Operation unallowed with the current privileges")
    return ForbiddenError(f"Cannot access {resource_name} with the current privileges", resource=resource_name)


def most_restrictive(policies: Iterable[WrapperPolicy], start: WrapperPolicy | None = None) -> WrapperPolicy:
    """Fold *policies* keeping the most restrictive; the first one seen wins ties."""
    current = start if start is not None else WrapperPolicy.read_write()
    for policy in policies:
        if policy.is_more_restrictive_than(current):
            current = policy
    return current


__all__ = ["AccessLevel", "Response", "WrapperPolicy", "most_restrictive", "unauthorized_access"]
