"""Application resources – ListingDefaults shared by every resource table."""
from __future__ import annotations

from dataclasses import dataclass

from catalog_query.application.pagination import MAX_PAGE_SIZE

__all__ = ["ListingDefaults"]


@dataclass(frozen=True)
class ListingDefaults:
    """Paging and ordering used when a request leaves them out.

    ``page_size`` applies to a ``page`` sent without ``limit``; every
    ``limit`` is capped at ``max_page_size``.  ``default_sort`` is used
    only by schemas that declare no sort of their own.
    """

    page_size: int = 20
    max_page_size: int = MAX_PAGE_SIZE
    default_sort: str | None = None
    top_n: int = 8

    def cap(self, limit: int | None) -> int | None:
        return limit if limit is None else min(limit, self.max_page_size)
