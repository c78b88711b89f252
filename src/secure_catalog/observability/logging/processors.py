"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from secure_catalog.kernel.security import RequestScope, SecurityContext


class AccessContextProcessor:
    """structlog processor that injects the ambient request identity.

    Adds, when available and not already bound:

    * ``principal`` – subject of the current principal
    * ``request_kind`` – protocol operation of the current request
    * ``admin_request`` – only when the request is admin-scoped

    Usage::

        structlog.configure(processors=[AccessContextProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        principal = SecurityContext.get_current()
        if principal is not None:
            event_dict.setdefault("principal", principal.subject)
        info = RequestScope.get_current()
        if info is not None:
            if info.kind is not None:
                event_dict.setdefault("request_kind", info.kind)
            if info.admin:
                event_dict.setdefault("admin_request", True)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["AccessContextProcessor", "get_logger"]
