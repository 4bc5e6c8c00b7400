"""Property-based tests for the listing pipeline."""

from __future__ import annotations

from typing import Any

import hypothesis.strategies as st
from hypothesis import HealthCheck, given, settings

from catalog_query.application.filtering import FilterCriterion, FilterPipeline, apply_filters
from catalog_query.application.listing import ListingQuery, run_listing
from catalog_query.application.pagination import project
from catalog_query.application.sorting import SortKey, sort_records
from catalog_query.kernel.records import to_number
from catalog_query.testing.generators import criteria_strategy, products_strategy

_SORT_KEYS = st.sampled_from([None, "bogus", *[k.value for k in SortKey]])


class TestFilterProperties:
    @settings(suppress_health_check=[HealthCheck.too_slow])
    @given(products_strategy(), criteria_strategy())
    def test_result_is_ordered_subset(self, products: list[dict[str, Any]], criteria: list[FilterCriterion]) -> None:
        result = apply_filters(products, criteria)
        it = iter(products)
        assert all(any(r is p for p in it) for r in result)

    @given(products_strategy(), criteria_strategy())
    def test_every_result_passes_every_active_criterion(
        self, products: list[dict[str, Any]], criteria: list[FilterCriterion]
    ) -> None:
        result = apply_filters(products, criteria)
        for criterion in criteria:
            single = FilterPipeline([criterion])
            assert all(single.matches(r) for r in result)

    @given(products_strategy(), criteria_strategy())
    def test_idempotent(self, products: list[dict[str, Any]], criteria: list[FilterCriterion]) -> None:
        once = apply_filters(products, criteria)
        assert apply_filters(once, criteria) == once

    @given(products_strategy(), criteria_strategy(), criteria_strategy())
    def test_adding_criteria_never_grows_result(
        self, products: list[dict[str, Any]], base: list[FilterCriterion], extra: list[FilterCriterion]
    ) -> None:
        assert len(apply_filters(products, base + extra)) <= len(apply_filters(products, base))

    @given(products_strategy(), st.sampled_from(["all", "", "  ", None]))
    def test_inactive_criteria_are_identity(self, products: list[dict[str, Any]], value: Any) -> None:
        criterion = FilterCriterion.equals("categoryId", value)
        assert apply_filters(products, [criterion]) == products


class TestSortProperties:
    @given(products_strategy(), _SORT_KEYS)
    def test_permutation(self, products: list[dict[str, Any]], key: str | None) -> None:
        result = sort_records(products, key)
        assert len(result) == len(products)
        assert sorted(map(id, result)) == sorted(map(id, products))

    @given(products_strategy())
    def test_price_low_is_non_decreasing(self, products: list[dict[str, Any]]) -> None:
        prices = [to_number(p.get("price")) for p in sort_records(products, "price-low")]
        assert prices == sorted(prices)

    @given(products_strategy(), _SORT_KEYS)
    def test_idempotent(self, products: list[dict[str, Any]], key: str | None) -> None:
        once = sort_records(products, key)
        assert sort_records(once, key) == once


class TestProjectionProperties:
    @given(st.lists(st.integers()), st.integers(-5, 40), st.none() | st.integers(-5, 40))
    def test_window_length(self, items: list[int], offset: int, limit: int | None) -> None:
        result = project(items, offset, limit)
        if offset < 0 or offset >= len(items) or (limit is not None and limit <= 0):
            assert result == []
        else:
            remaining = len(items) - offset
            assert len(result) == (remaining if limit is None else min(limit, remaining))
            assert result == items[offset:offset + len(result)]

    @settings(max_examples=50)
    @given(products_strategy(), criteria_strategy(), _SORT_KEYS, st.integers(0, 10), st.integers(1, 10))
    def test_listing_counts(
        self,
        products: list[dict[str, Any]],
        criteria: list[FilterCriterion],
        key: str | None,
        offset: int,
        limit: int,
    ) -> None:
        result = run_listing(products, ListingQuery(criteria=tuple(criteria), sort_key=key, offset=offset, limit=limit))
        assert result.total == len(products)
        assert result.matched == len(apply_filters(products, criteria))
        assert len(result.items) <= limit
        assert result.has_more == (offset + len(result.items) < result.matched)
