"""Kernel security – Principal, Role, ambient contexts, AccessContext."""
from secure_catalog.kernel.security.principal import ANONYMOUS, Principal, Role
from secure_catalog.kernel.security.security_context import (
    RequestInfo,
    RequestScope,
    SecurityContext,
)
from secure_catalog.kernel.security.access_context import AccessContext

__all__ = [
    "ANONYMOUS",
    "AccessContext",
    "Principal",
    "RequestInfo",
    "RequestScope",
    "Role",
    "SecurityContext",
]
