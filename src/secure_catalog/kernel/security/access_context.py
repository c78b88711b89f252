"""Kernel security – AccessContext, the explicit per-decision input."""
from __future__ import annotations

import dataclasses
from typing import Iterable

from secure_catalog.kernel.security.principal import Principal
from secure_catalog.kernel.security.security_context import RequestScope, SecurityContext


@dataclasses.dataclass(frozen=True)
class AccessContext:
    """Everything an authorization decision may depend on besides the object.

    Instances are immutable snapshots; pass the same one through a whole
    resolution so the ambient state is read exactly once.
    """
    principal: Principal | None = None
    admin_request: bool = False
    request_kind: str | None = None

    @classmethod
    def from_ambient(cls) -> "AccessContext":
        """Snapshot :class:`SecurityContext` and :class:`RequestScope`."""
        info = RequestScope.get_current()
        return cls(
            principal=SecurityContext.get_current(),
            admin_request=bool(info and info.admin),
            request_kind=info.kind if info else None,
        )

    @property
    def is_anonymous(self) -> bool:
        """No principal, or one without any granted authority."""
        return self.principal is None or not self.principal.roles

    def has_role(self, role: str) -> bool:
        return self.principal is not None and self.principal.has_role(role)

    def is_administrator(self, admin_role: str) -> bool:
        p = self.principal
        return p is not None and p.authenticated and p.has_role(admin_role)

    def is_capabilities_request(self, kinds: Iterable[str]) -> bool:
        """Case-insensitive match of the request kind against *kinds*."""
        if not self.request_kind:
            return False
        current = self.request_kind.lower()
        return any(current == k.lower() for k in kinds)


__all__ = ["AccessContext"]
