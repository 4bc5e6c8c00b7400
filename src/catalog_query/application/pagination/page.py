"""Application pagination – view projection and the Page view."""
from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from catalog_query.application.pagination.page_request import PageRequest

if TYPE_CHECKING:
    from catalog_query.application.listing import ResultSet

T = TypeVar("T")


def project(records: Sequence[T] | None, offset: int = 0, limit: int | None = None) -> list[T]:
    """Return the ``[offset, offset + limit)`` window of *records* as a new list.

    A negative or out-of-range offset, or a non-positive limit, yields ``[]``.
    ``limit=None`` runs to the end of the sequence.
    """
    if not records or offset < 0 or offset >= len(records):
        return []
    if limit is None:
        return list(records[offset:])
    if limit <= 0:
        return []
    return list(records[offset:offset + limit])


def top_n(records: Sequence[T] | None, n: int) -> list[T]:
    """First *n* records, for "top products" style widgets."""
    return project(records, 0, n)


@dataclasses.dataclass(frozen=True)
class Page(Generic[T]):
    """One numbered page (from 1) of a listing.

    ``total`` counts the records the listing matched, not the source size.
    """

    items: list[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0 or self.total <= 0:
            return 0
        return -(-self.total // self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        return dataclasses.replace(self, items=[fn(item) for item in self.items])

    def pagination(self) -> dict[str, int]:
        """The ``{page, limit, total, pages}`` block listing endpoints return."""
        return {"page": self.page, "limit": self.size, "total": self.total, "pages": self.total_pages}

    @classmethod
    def of(cls, records: Sequence[T], request: PageRequest) -> "Page[T]":
        return cls(
            items=project(records, request.offset, request.size),
            total=len(records),
            page=request.page,
            size=request.size,
        )

    @classmethod
    def from_result(cls, result: "ResultSet[T]") -> "Page[T]":
        """Number a limited :class:`ResultSet`; an unlimited one is a single page."""
        size = result.limit if result.limit and result.limit > 0 else max(result.matched, 1)
        return cls(
            items=list(result.items),
            total=result.matched,
            page=result.offset // size + 1,
            size=size,
        )


__all__ = ["Page", "project", "top_n"]
