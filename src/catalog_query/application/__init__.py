"""Application – the listing pipeline and its supporting use-case helpers."""

from catalog_query.application.filtering import ALL, FilterCriterion, FilterPipeline, Operator, Range, apply_filters
from catalog_query.application.listing import ListingQuery, ResultSet, count_by, count_windows, run_listing
from catalog_query.application.pagination import Page, PageRequest, project, top_n
from catalog_query.application.resources import ResourceSchema, ResourceTable
from catalog_query.application.sorting import (
    ComparatorRegistry,
    SortDirection,
    SortKey,
    SortSpec,
    get_comparator,
    sort_records,
)

__all__ = [
    "ALL",
    "ComparatorRegistry",
    "FilterCriterion",
    "FilterPipeline",
    "ListingQuery",
    "Operator",
    "Page",
    "PageRequest",
    "Range",
    "ResourceSchema",
    "ResourceTable",
    "ResultSet",
    "SortDirection",
    "SortKey",
    "SortSpec",
    "apply_filters",
    "count_by",
    "count_windows",
    "get_comparator",
    "project",
    "run_listing",
    "sort_records",
    "top_n",
]
