"""Kernel query – specifications used as catalog filters."""
from secure_catalog.kernel.query.predicates import (
    PropertyEquals,
    PropertyIsNull,
    equal,
    is_null,
    is_pushdown_capable,
    property_value,
    property_values,
)
from secure_catalog.kernel.query.specification import (
    EXCLUDE,
    INCLUDE,
    AndSpecification,
    BaseSpecification,
    LambdaSpecification,
    NotSpecification,
    OrSpecification,
    Specification,
    and_,
    or_,
)

__all__ = [
    "EXCLUDE",
    "INCLUDE",
    "AndSpecification",
    "BaseSpecification",
    "LambdaSpecification",
    "NotSpecification",
    "OrSpecification",
    "PropertyEquals",
    "PropertyIsNull",
    "Specification",
    "and_",
    "equal",
    "is_null",
    "is_pushdown_capable",
    "or_",
    "property_value",
    "property_values",
]
