"""Application listing – run_listing composes filter, sort and projection."""
from __future__ import annotations

import functools
from collections.abc import Iterable, Sequence
from typing import TypeVar

from catalog_query.application.filtering import FilterCriterion, FilterPipeline
from catalog_query.application.listing.query import ListingQuery
from catalog_query.application.listing.result import ResultSet
from catalog_query.application.pagination import project
from catalog_query.application.sorting import DEFAULT_REGISTRY, ComparatorRegistry, comparator_for
from catalog_query.kernel.records import FieldRef
from catalog_query.observability.logging import get_logger

T = TypeVar("T")

__all__ = ["build_criteria", "run_listing"]

logger = get_logger(__name__)


def build_criteria(query: ListingQuery, search_fields: Iterable[FieldRef] = ()) -> list[FilterCriterion]:
    """Combine the query's free-text search with its explicit criteria.

    Search text needs *search_fields* to match against; without them it is
    ignored and a ``listing.search_ignored`` warning is logged.
    """
    criteria = list(query.criteria)
    fields = tuple(search_fields)
    if query.search:
        if fields:
            criteria.insert(0, FilterCriterion.search(query.search, fields))
        else:
            logger.warning("listing.search_ignored", search=query.search, reason="no search fields")
    return criteria


def _sorted(records: list[T], query: ListingQuery, registry: ComparatorRegistry) -> list[T]:
    if query.sort is not None:
        return sorted(records, key=functools.cmp_to_key(comparator_for(query.sort)))
    return registry.sort(records, query.sort_key)


def run_listing(
    records: Sequence[T] | None,
    query: ListingQuery,
    *,
    search_fields: Iterable[FieldRef] = (),
    registry: ComparatorRegistry | None = None,
) -> ResultSet[T]:
    """Derive a fresh :class:`ResultSet` from *records*; *records* is never mutated.

    Free-text search only applies when *search_fields* are given.
    """
    source = list(records) if records is not None else []
    pipeline = FilterPipeline(build_criteria(query, search_fields))
    matched = pipeline.apply(source)
    ordered = _sorted(matched, query, registry or DEFAULT_REGISTRY)
    items = project(ordered, query.offset, query.limit)
    logger.debug(
        "listing.computed",
        total=len(source),
        matched=len(matched),
        returned=len(items),
        active_filters=len(pipeline),
    )
    return ResultSet(
        items=items,
        total=len(source),
        matched=len(matched),
        offset=query.offset,
        limit=query.limit,
    )
