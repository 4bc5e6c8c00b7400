"""Application filtering – criteria, predicates and the filter pipeline."""
from catalog_query.application.filtering.criterion import ALL, FilterCriterion, Operator, Range
from catalog_query.application.filtering.pipeline import FilterPipeline, apply_filters
from catalog_query.application.filtering.predicates import (
    Predicate,
    any_element,
    build_predicate,
    contains_text,
    equals,
    in_range,
    one_of,
)
from catalog_query.application.filtering.windows import (
    DATE_WINDOWS,
    STATUS_CLASSES,
    date_window,
    months_before,
    price_bracket,
    status_class,
)

__all__ = [
    "ALL",
    "DATE_WINDOWS",
    "FilterCriterion",
    "FilterPipeline",
    "Operator",
    "Predicate",
    "Range",
    "STATUS_CLASSES",
    "any_element",
    "apply_filters",
    "build_predicate",
    "contains_text",
    "date_window",
    "equals",
    "in_range",
    "months_before",
    "one_of",
    "price_bracket",
    "status_class",
]
