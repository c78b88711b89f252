"""Domain errors — catalog consistency violations."""

from __future__ import annotations

from typing import Any

from secure_catalog.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a catalog rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """A catalog object does not meet validation rules.

    ``field`` names the offending attribute when there is a single one.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.field is not None:
            base["field"] = self.field
        return base


class NotFoundError(DomainError):
    """The requested catalog object does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """The operation conflicts with existing catalog state."""

    default_code = "conflict"


__all__ = [
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
