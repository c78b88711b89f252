"""Application-layer errors raised by authorization decisions."""

from __future__ import annotations

from typing import Any

from secure_catalog.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """The caller is anonymous (or holds no authorities) and must authenticate."""

    default_code = "unauthorized"

    def __init__(
        self,
        message: str = "Authentication required",
        *,
        resource: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.resource = resource


class ForbiddenError(ApplicationError):
    """Authenticated principal lacks the privileges for the requested access."""

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        resource: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.resource = resource


__all__ = [
    "ApplicationError",
    "ForbiddenError",
    "UnauthorizedError",
]
