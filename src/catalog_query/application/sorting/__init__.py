"""Application sorting – comparator registry and sort specifications."""
from catalog_query.application.sorting.registry import (
    DEFAULT_REGISTRY,
    Comparator,
    ComparatorRegistry,
    SortKey,
    collation_key,
    field_comparator,
    get_comparator,
    identity,
    sort_records,
)
from catalog_query.application.sorting.spec import SortDirection, SortSpec, comparator_for

__all__ = [
    "DEFAULT_REGISTRY",
    "Comparator",
    "ComparatorRegistry",
    "SortDirection",
    "SortKey",
    "SortSpec",
    "collation_key",
    "comparator_for",
    "field_comparator",
    "get_comparator",
    "identity",
    "sort_records",
]
