"""Specification pattern — composable boolean rules used as catalog query filters."""

from __future__ import annotations

import abc
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """Abstract base for specifications — provides operator overloads.

    Subclass this and implement ``is_satisfied_by``. ``pushdown`` tells a
    storage backend whether the rule can be translated into its native
    query language; the in-process default is ``False``.

    Example::

        class Enabled(BaseSpecification[StoreInfo]):
            pushdown = True

            def is_satisfied_by(self, candidate: StoreInfo) -> bool:
                return candidate.enabled

        spec = Enabled() & equal("workspace.name", "topp")
    """

    pushdown: bool = False

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def __call__(self, candidate: T) -> bool:
        return self.is_satisfied_by(candidate)

    # Named combinators ------------------------------------------------
    def and_(self, other: "BaseSpecification[T]") -> "BaseSpecification[T]":
        return and_(self, other)

    def or_(self, other: "BaseSpecification[T]") -> "BaseSpecification[T]":
        return or_(self, other)

    def not_(self) -> "NotSpecification[T]":
        return NotSpecification(self)

    # Operator overloads -----------------------------------------------
    def __and__(self, other: "BaseSpecification[T]") -> "BaseSpecification[T]":
        return and_(self, other)

    def __or__(self, other: "BaseSpecification[T]") -> "BaseSpecification[T]":
        return or_(self, other)

    def __invert__(self) -> "NotSpecification[T]":
        return NotSpecification(self)


Specification = BaseSpecification  # type: ignore[misc]


class _Include(BaseSpecification[object]):
    pushdown = True

    def is_satisfied_by(self, candidate: object) -> bool:
        return True

    def __repr__(self) -> str:
        return "INCLUDE"


class _Exclude(BaseSpecification[object]):
    pushdown = True

    def is_satisfied_by(self, candidate: object) -> bool:
        return False

    def __repr__(self) -> str:
        return "EXCLUDE"


#: Accepts every candidate.
INCLUDE: BaseSpecification = _Include()
#: Rejects every candidate.
EXCLUDE: BaseSpecification = _Exclude()


class AndSpecification(BaseSpecification[T]):
    """Conjunction of two specifications."""

    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self.left = left
        self.right = right

    @property
    def pushdown(self) -> bool:  # type: ignore[override]
        return self.left.pushdown and self.right.pushdown

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)

    def __repr__(self) -> str:
        return f"({self.left!r} AND {self.right!r})"


class OrSpecification(BaseSpecification[T]):
    """Disjunction of two specifications."""

    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self.left = left
        self.right = right

    @property
    def pushdown(self) -> bool:  # type: ignore[override]
        return self.left.pushdown and self.right.pushdown

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)

    def __repr__(self) -> str:
        return f"({self.left!r} OR {self.right!r})"


class NotSpecification(BaseSpecification[T]):
    """Negation of a specification."""

    def __init__(self, spec: BaseSpecification[T]) -> None:
        self.spec = spec

    @property
    def pushdown(self) -> bool:  # type: ignore[override]
        return self.spec.pushdown

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.spec.is_satisfied_by(candidate)


class LambdaSpecification(BaseSpecification[T]):
    """Wraps a plain callable as a ``Specification``.

    Example::

        enabled = LambdaSpecification(lambda s: s.enabled, name="enabled")
    """

    def __init__(
        self,
        predicate: Callable[[T], bool],
        *,
        name: str = "",
    ) -> None:
        self._predicate = predicate
        self.name: str = name or getattr(predicate, "__name__", "<lambda>")

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._predicate(candidate)

    def __repr__(self) -> str:  # pragma: no cover
        return f"LambdaSpecification({self.name!r})"


def and_(left: BaseSpecification[T], right: BaseSpecification[T]) -> BaseSpecification[T]:
    """Conjunction that folds away ``INCLUDE`` and short-circuits ``EXCLUDE``."""
    if left is INCLUDE:
        return right
    if right is INCLUDE:
        return left
    if left is EXCLUDE or right is EXCLUDE:
        return EXCLUDE
    return AndSpecification(left, right)


def or_(left: BaseSpecification[T], right: BaseSpecification[T]) -> BaseSpecification[T]:
    """Disjunction that folds away ``EXCLUDE`` and short-circuits ``INCLUDE``."""
    if left is EXCLUDE:
        return right
    if right is EXCLUDE:
        return left
    if left is INCLUDE or right is INCLUDE:
        return INCLUDE
    return OrSpecification(left, right)


__all__ = [
    "EXCLUDE",
    "INCLUDE",
    "AndSpecification",
    "BaseSpecification",
    "LambdaSpecification",
    "NotSpecification",
    "OrSpecification",
    "Specification",
    "and_",
    "or_",
]
