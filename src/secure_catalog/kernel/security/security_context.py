"""Kernel security – ambient principal and request scope using contextvars.

These stores belong to the surrounding request-handling code. The
authorization engine only ever reads them, once per decision, through
:meth:`AccessContext.from_ambient`.
"""

from __future__ import annotations

import contextlib
import contextvars
import dataclasses
from typing import Iterator

from secure_catalog.kernel.security.principal import Principal

_PRINCIPAL: contextvars.ContextVar[Principal | None] = contextvars.ContextVar(
    "_security_context", default=None
)


@dataclasses.dataclass(frozen=True)
class RequestInfo:
    """What the current request is.

    ``kind`` is the protocol operation name (e.g. ``"GetCapabilities"``);
    ``admin`` flags requests issued against the administrative surface.
    """
    kind: str | None = None
    admin: bool = False


_REQUEST: contextvars.ContextVar[RequestInfo | None] = contextvars.ContextVar(
    "_request_scope", default=None
)


class SecurityContext:
    """Store and retrieve the current :class:`Principal` via
    :mod:`contextvars` so each thread / asyncio task has its own context."""

    @staticmethod
    def get_current() -> Principal | None:
        """Return the current principal, or ``None`` if absent."""
        return _PRINCIPAL.get()

    @staticmethod
    def set_current(principal: Principal | None) -> contextvars.Token[Principal | None]:
        """Set the current principal and return a reset token."""
        return _PRINCIPAL.set(principal)

    @staticmethod
    def clear() -> None:
        """Remove the current principal from context."""
        _PRINCIPAL.set(None)

    @staticmethod
    @contextlib.contextmanager
    def as_principal(principal: Principal | None) -> Iterator[Principal | None]:
        """Run a block with *principal* installed, restoring the previous one."""
        token = _PRINCIPAL.set(principal)
        try:
            yield principal
        finally:
            _PRINCIPAL.reset(token)


class RequestScope:
    """Ambient :class:`RequestInfo` for the request being served."""

    @staticmethod
    def get_current() -> RequestInfo | None:
        return _REQUEST.get()

    @staticmethod
    def set_current(info: RequestInfo | None) -> contextvars.Token[RequestInfo | None]:
        return _REQUEST.set(info)

    @staticmethod
    def clear() -> None:
        _REQUEST.set(None)

    @staticmethod
    @contextlib.contextmanager
    def request(kind: str | None = None, *, admin: bool = False) -> Iterator[RequestInfo]:
        """Run a block as part of a request of the given *kind*.

        Example::

            with RequestScope.request("GetCapabilities"):
                layers = secure_catalog.get_layers()
        """
        info = RequestInfo(kind=kind, admin=admin)
        token = _REQUEST.set(info)
        try:
            yield info
        finally:
            _REQUEST.reset(token)


__all__ = ["RequestInfo", "RequestScope", "SecurityContext"]
