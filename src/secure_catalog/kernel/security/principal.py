"""Kernel security – Principal, Role."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class Role:
    """Named granted authority (e.g. ROLE_ADMINISTRATOR)."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True)
class Principal:
    """Already-resolved caller identity.

    ``authenticated`` is ``False`` for anonymous callers; such principals are
    never considered administrators even if they carry roles.
    """
    subject: str
    roles: frozenset[Role] = frozenset()
    claims: dict[str, Any] = dataclasses.field(default_factory=dict, compare=False, hash=False)
    authenticated: bool = True

    @classmethod
    def of(cls, subject: str, *roles: str, **claims: Any) -> "Principal":
        """Shorthand: ``Principal.of("bob", "ROLE_EDITOR")``."""
        return cls(subject=subject, roles=frozenset(Role(r) for r in roles), claims=claims)

    @property
    def authorities(self) -> frozenset[str]:
        return frozenset(r.name for r in self.roles)

    def has_role(self, role: str | Role) -> bool:
        name = role.name if isinstance(role, Role) else role
        return any(r.name == name for r in self.roles)


ANONYMOUS = Principal(subject="anonymous", authenticated=False)


__all__ = ["ANONYMOUS", "Principal", "Role"]
