"""Application listing – the composed filter/sort/projection pipeline."""
from catalog_query.application.listing.facets import count_by, count_windows
from catalog_query.application.listing.query import ListingQuery
from catalog_query.application.listing.result import ResultSet
from catalog_query.application.listing.service import build_criteria, run_listing

__all__ = [
    "ListingQuery",
    "ResultSet",
    "build_criteria",
    "count_by",
    "count_windows",
    "run_listing",
]
