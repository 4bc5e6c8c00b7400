"""Unit tests for view projection and page primitives."""

from __future__ import annotations

import pytest

from catalog_query.application.listing import ListingQuery, run_listing
from catalog_query.application.pagination import MAX_PAGE_SIZE, Page, PageRequest, project, top_n
from catalog_query.kernel.errors import ValidationError


# ---------------------------------------------------------------------------
# project / top_n
# ---------------------------------------------------------------------------


class TestProject:
    def test_window(self) -> None:
        assert project(list(range(10)), 2, 3) == [2, 3, 4]

    def test_limit_past_end_is_truncated(self) -> None:
        assert project([1, 2, 3], 1, 50) == [2, 3]

    def test_no_limit_runs_to_end(self) -> None:
        assert project([1, 2, 3], 1) == [2, 3]

    @pytest.mark.parametrize(("offset", "limit"), [(-1, 2), (3, 2), (10, 2), (0, 0), (0, -4)])
    def test_empty_windows(self, offset: int, limit: int) -> None:
        assert project([1, 2, 3], offset, limit) == []

    def test_empty_and_none_source(self) -> None:
        assert project([], 0, 5) == []
        assert project(None, 0, 5) == []

    def test_returns_new_list(self) -> None:
        source = [1, 2, 3]
        result = project(source)
        assert result == source
        assert result is not source

    def test_top_n(self) -> None:
        assert top_n(list("abcdefghij"), 8) == list("abcdefgh")
        assert top_n(list("abc"), 8) == list("abc")


# ---------------------------------------------------------------------------
# PageRequest
# ---------------------------------------------------------------------------


class TestPageRequest:
    def test_defaults(self) -> None:
        pr = PageRequest()
        assert pr.page == 1
        assert pr.size == 20

    def test_offset(self) -> None:
        assert PageRequest(page=3, size=10).offset == 20

    def test_page_zero_raises(self) -> None:
        with pytest.raises(ValidationError):
            PageRequest(page=0)

    def test_size_zero_raises(self) -> None:
        with pytest.raises(ValidationError):
            PageRequest(size=0)

    def test_size_max_raises(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            PageRequest(size=MAX_PAGE_SIZE + 1)
        assert exc_info.value.errors[0]["field"] == "size"

    def test_parse_raw_values(self) -> None:
        pr = PageRequest.parse("2", "", default_size=12)
        assert (pr.page, pr.size, pr.limit, pr.offset) == (2, 12, 12, 12)

    def test_parse_rejects_text(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            PageRequest.parse("two")
        assert exc_info.value.errors == [{"field": "page", "value": "two"}]
        assert isinstance(exc_info.value.cause, ValueError)


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------


class TestPage:
    def test_of_slices_items(self) -> None:
        page = Page.of(list(range(100)), PageRequest(page=2, size=10))
        assert page.items == list(range(10, 20))
        assert page.total == 100

    def test_total_pages(self) -> None:
        assert Page.of(list(range(25)), PageRequest(size=10)).total_pages == 3
        assert Page.of(list(range(20)), PageRequest(size=10)).total_pages == 2

    def test_empty_has_no_pages(self) -> None:
        page = Page.of([], PageRequest())
        assert page.total_pages == 0
        assert not page.has_next

    def test_navigation(self) -> None:
        first = Page.of(list(range(25)), PageRequest(page=1, size=10))
        last = Page.of(list(range(25)), PageRequest(page=3, size=10))
        assert first.has_next and not first.has_previous
        assert last.has_previous and not last.has_next
        assert last.items == list(range(20, 25))

    def test_page_past_end_is_empty(self) -> None:
        assert Page.of(list(range(5)), PageRequest(page=4, size=10)).items == []

    def test_map(self) -> None:
        page = Page.of([1, 2, 3], PageRequest(size=2)).map(lambda x: x * 10)
        assert page.items == [10, 20]
        assert page.total == 3

    def test_pagination_block(self) -> None:
        page = Page.of(list(range(25)), PageRequest(page=2, size=10))
        assert page.pagination() == {"page": 2, "limit": 10, "total": 25, "pages": 3}


class TestPageFromResult:
    def test_numbers_limited_result(self) -> None:
        result = run_listing(list(range(25)), ListingQuery(offset=20, limit=10))
        page = Page.from_result(result)
        assert page.page == 3
        assert page.items == list(range(20, 25))
        assert not page.has_next

    def test_unlimited_result_is_single_page(self) -> None:
        page = Page.from_result(run_listing(list(range(5)), ListingQuery()))
        assert page.total_pages == 1
        assert page.size == 5
