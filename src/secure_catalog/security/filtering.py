"""Collection filtering and the query security predicate."""
from __future__ import annotations

from typing import Iterable, Iterator, TypeVar

from secure_catalog.catalog.model import CatalogInfo, Map, Style
from secure_catalog.kernel.query import INCLUDE, BaseSpecification, and_
from secure_catalog.kernel.security import AccessContext
from secure_catalog.security.decorator import ObjectDecorator
from secure_catalog.security.resolver import PolicyResolver

T = TypeVar("T", bound=CatalogInfo)


class SecurityPredicate(BaseSpecification[CatalogInfo]):
    """Matches the objects *ctx* may see (anything not ``HIDDEN``).

    Evaluated in process: storage backends cannot translate it and must
    apply it after their own native filtering.
    """

    pushdown = False

    def __init__(self, resolver: PolicyResolver, ctx: AccessContext) -> None:
        self.resolver = resolver
        self.ctx = ctx

    def is_satisfied_by(self, candidate: CatalogInfo) -> bool:
        return not self.resolver.resolve_for(self.ctx, candidate).is_hidden

    def __repr__(self) -> str:
        principal = self.ctx.principal.subject if self.ctx.principal else None
        return f"SecurityPredicate(principal={principal!r})"


class CollectionFilter:
    """Decorate sequences of catalog objects, dropping the hidden ones."""

    def __init__(self, decorator: ObjectDecorator) -> None:
        self.decorator = decorator

    @property
    def resolver(self) -> PolicyResolver:
        return self.decorator.resolver

    def filter(self, ctx: AccessContext, items: Iterable[T]) -> list[T]:
        """Order-preserving; applying it to its own output changes nothing."""
        return list(self.iter_filter(ctx, items))

    def iter_filter(self, ctx: AccessContext, items: Iterable[T]) -> Iterator[T]:
        for item in items:
            decorated = self.decorator.decorate(ctx, item)
            if decorated is not None:
                yield decorated

    def security_filter(
        self,
        ctx: AccessContext,
        of: type[CatalogInfo],
        caller_filter: BaseSpecification = INCLUDE,
    ) -> BaseSpecification:
        """Combine *caller_filter* with the visibility predicate for *ctx*.

        Administrators get the caller filter untouched. Styles and maps only
        carry an existence check, so queries on them are not restricted here.
        """
        if ctx.is_administrator(self.resolver.settings.admin_role):
            return caller_filter
        if issubclass(of, (Style, Map)):
            return caller_filter
        return and_(caller_filter, SecurityPredicate(self.resolver, ctx))


__all__ = ["CollectionFilter", "SecurityPredicate"]
