"""Unit tests for specifications and catalog predicates."""

from __future__ import annotations

from secure_catalog.catalog.model import Layer, Style
from secure_catalog.kernel.query import (
    EXCLUDE,
    INCLUDE,
    AndSpecification,
    LambdaSpecification,
    OrSpecification,
    and_,
    equal,
    is_null,
    is_pushdown_capable,
    or_,
    property_value,
    property_values,
)


def _layer() -> Layer:
    polygon = Style(name="polygon", id="s1")
    line = Style(name="line", id="s2")
    return Layer(name="states", default_style=polygon, styles=[line, None])  # type: ignore[list-item]


# ---------------------------------------------------------------------------
# Property paths
# ---------------------------------------------------------------------------


class TestPropertyValues:
    def test_simple_path(self) -> None:
        assert property_values(_layer(), "name") == ["states"]

    def test_dotted_path(self) -> None:
        assert property_value(_layer(), "default_style.name") == "polygon"

    def test_collections_are_flattened_and_none_skipped(self) -> None:
        assert property_values(_layer(), "styles.name") == ["line"]

    def test_missing_attribute_yields_nothing(self) -> None:
        assert property_values(_layer(), "resource.store.name") == []
        assert property_value(_layer(), "nope") is None


class TestPredicates:
    def test_equal_any_match(self) -> None:
        assert equal("styles.id", "s2")(_layer()) is True
        assert equal("styles.id", "s1")(_layer()) is False

    def test_is_null(self) -> None:
        assert is_null("resource")(_layer()) is True
        assert is_null("default_style")(_layer()) is False

    def test_property_predicates_push_down(self) -> None:
        assert is_pushdown_capable(equal("name", "x") & is_null("resource")) is True


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestCombinators:
    def test_and_folds_include(self) -> None:
        spec = equal("name", "states")
        assert and_(INCLUDE, spec) is spec
        assert and_(spec, INCLUDE) is spec

    def test_and_short_circuits_exclude(self) -> None:
        assert and_(equal("name", "x"), EXCLUDE) is EXCLUDE

    def test_or_folds(self) -> None:
        spec = equal("name", "states")
        assert or_(EXCLUDE, spec) is spec
        assert or_(spec, INCLUDE) is INCLUDE

    def test_operators_build_composites(self) -> None:
        a, b = equal("name", "states"), equal("name", "roads")
        assert isinstance(a & b, AndSpecification)
        assert isinstance(a | b, OrSpecification)
        assert (a | b)(_layer()) is True
        assert (~a)(_layer()) is False

    def test_lambda_is_not_pushdown(self) -> None:
        spec = equal("name", "states") & LambdaSpecification(lambda c: True, name="always")
        assert spec.pushdown is False
        assert spec(_layer()) is True
