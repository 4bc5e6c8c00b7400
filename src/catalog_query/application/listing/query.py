"""Application listing – ListingQuery value object."""
from __future__ import annotations

from dataclasses import dataclass, field

from catalog_query.application.filtering import FilterCriterion
from catalog_query.application.sorting import SortKey, SortSpec

__all__ = ["ListingQuery"]


@dataclass(frozen=True)
class ListingQuery:
    """Everything a listing control panel contributes to one recomputation.

    ``sort_key`` names a registry comparator; ``sort`` is an explicit
    field/direction pair and wins when both are given.
    """
    search: str = ""
    criteria: tuple[FilterCriterion, ...] = field(default_factory=tuple)
    sort_key: str | SortKey | None = None
    sort: SortSpec | None = None
    offset: int = 0
    limit: int | None = None
