"""Unit tests for criteria, predicates and the filter pipeline."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from catalog_query.application.filtering import (
    ALL,
    FilterCriterion,
    FilterPipeline,
    Operator,
    Range,
    any_element,
    apply_filters,
    contains_text,
    in_range,
)
from catalog_query.testing import make_product


# ---------------------------------------------------------------------------
# FilterCriterion
# ---------------------------------------------------------------------------


class TestFilterCriterion:
    @pytest.mark.parametrize("value", [None, "", "   ", ALL, "All", [], Range()])
    def test_inactive_values(self, value: object) -> None:
        assert not FilterCriterion("categoryId", Operator.EQUALS, value).is_active

    @pytest.mark.parametrize("value", ["c1", 0, False, ["red"], Range(min=1)])
    def test_active_values(self, value: object) -> None:
        assert FilterCriterion("categoryId", Operator.EQUALS, value).is_active

    def test_fields_single(self) -> None:
        assert FilterCriterion.equals("name", "x").fields == ("name",)

    def test_search_fields_tuple(self) -> None:
        criterion = FilterCriterion.search("kimono", ["name", "tags"])
        assert criterion.op is Operator.CONTAINS
        assert criterion.fields == ("name", "tags")

    def test_in_range_factory(self) -> None:
        criterion = FilterCriterion.in_range("price", 10, 20)
        assert criterion.value == Range(10, 20)

    def test_within_none_is_inactive(self) -> None:
        assert not FilterCriterion.within("price", None).is_active

    def test_one_of_freezes_values(self) -> None:
        assert FilterCriterion.one_of("status", ["a", "b"]).value == frozenset({"a", "b"})


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


class TestInRange:
    def test_inclusive_bounds(self) -> None:
        rng = Range.between(10, 20)
        assert in_range(10, rng)
        assert in_range(20, rng)
        assert not in_range(21, rng)

    def test_half_open_excludes_upper(self) -> None:
        rng = Range.half_open(200, 300)
        assert in_range(200, rng)
        assert in_range(299, rng)
        assert not in_range(300, rng)

    def test_above_and_below_exclusive(self) -> None:
        assert not in_range(100, Range.above(100))
        assert in_range(101, Range.above(100))
        assert not in_range(100, Range.below(100))

    def test_numeric_strings_compare_as_numbers(self) -> None:
        assert in_range("250000", Range.between(200000, 500000))

    def test_none_and_garbage_are_non_matches(self) -> None:
        assert not in_range(None, Range.at_least(0))
        assert not in_range("cheap", Range.at_least(0))

    def test_datetime_bounds(self) -> None:
        rng = Range.at_least(datetime(2026, 1, 1, tzinfo=UTC))
        assert in_range("2026-01-02T00:00:00Z", rng)
        assert not in_range("2025-12-31T23:59:59Z", rng)
        assert not in_range("not a date", rng)

    def test_iso_string_bounds_are_temporal(self) -> None:
        assert in_range(datetime(2026, 3, 1), Range.between("2026-01-01", "2026-12-31"))


class TestContainsText:
    def test_case_insensitive(self) -> None:
        assert contains_text(["Kimono Traditional"], "KIMONO")

    def test_any_field_matches(self) -> None:
        assert contains_text(["Obi", None, "summer silk"], "silk")

    def test_list_elements(self) -> None:
        assert contains_text([["cotton", "summer"]], "summ")

    def test_numbers_are_searchable(self) -> None:
        assert contains_text([12345], "234")

    def test_blank_query_matches_nothing(self) -> None:
        assert not contains_text(["anything"], "  ")


class TestAnyElement:
    def test_plain_strings_equals(self) -> None:
        assert any_element(["Red", "white"], "red")
        assert not any_element(["dark red"], "red")

    def test_contains_mode(self) -> None:
        assert any_element(["Navy Blue"], "blue", "contains")

    def test_swatch_mappings(self) -> None:
        swatches = [{"name": "Navy", "value": "#000080"}]
        assert any_element(swatches, "navy")
        assert any_element(swatches, "#000080")

    def test_non_sequence_is_non_match(self) -> None:
        assert not any_element("red", "red")
        assert not any_element([], "red")


# ---------------------------------------------------------------------------
# FilterPipeline
# ---------------------------------------------------------------------------


class TestFilterPipeline:
    def test_drops_inactive_criteria(self) -> None:
        pipeline = FilterPipeline(
            [FilterCriterion.equals("categoryId", ALL), FilterCriterion.equals("categoryId", "c1")]
        )
        assert len(pipeline) == 1
        assert pipeline.active[0].value == "c1"

    def test_conjunction(self) -> None:
        products = [
            make_product("Kimono", 100, categoryId="c1"),
            make_product("Kimono", 900, categoryId="c1"),
            make_product("Kimono", 100, categoryId="c2"),
        ]
        result = apply_filters(
            products,
            [FilterCriterion.equals("categoryId", "c1"), FilterCriterion.in_range("price", 0, 500)],
        )
        assert result == [products[0]]

    def test_no_criteria_returns_copy(self) -> None:
        products = [make_product(), make_product()]
        result = apply_filters(products)
        assert result == products
        assert result is not products

    def test_none_source_is_empty(self) -> None:
        assert apply_filters(None, [FilterCriterion.equals("name", "x")]) == []

    def test_preserves_input_order(self) -> None:
        products = [make_product(f"Kimono {i}", i) for i in range(5)]
        result = apply_filters(products, [FilterCriterion.search("kimono", ("name",))])
        assert result == products

    def test_missing_field_is_excluded(self) -> None:
        products = [{"name": "no category"}, make_product(categoryId="c1")]
        assert len(apply_filters(products, [FilterCriterion.equals("categoryId", "c1")])) == 1

    def test_short_circuits_after_first_failure(self) -> None:
        seen: list[object] = []

        def tracked(record: dict) -> object:
            seen.append(record)
            return record.get("price")

        pipeline = FilterPipeline(
            [FilterCriterion.equals("categoryId", "c9"), FilterCriterion.equals(tracked, 1)]
        )
        pipeline.apply([make_product(categoryId="c1")])
        assert seen == []

    def test_search_across_tags_and_description(self) -> None:
        products = [
            make_product("Yukata", tags=["summer"]),
            make_product("Haori", description="Warm winter jacket"),
            make_product("Obi"),
        ]
        fields = ("name", "description", "tags")
        assert apply_filters(products, [FilterCriterion.search("SUMMER", fields)]) == [products[0]]
        assert apply_filters(products, [FilterCriterion.search("winter", fields)]) == [products[1]]

    def test_one_of(self) -> None:
        records = [{"status": "pending"}, {"status": "paid"}, {"status": "failed"}]
        result = apply_filters(records, [FilterCriterion.one_of("status", {"paid", "failed"})])
        assert result == records[1:]
