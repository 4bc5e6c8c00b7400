"""
catalog_query – Storefront listing pipeline.

Import path convention::

    from catalog_query.application.filtering import FilterCriterion, apply_filters
    from catalog_query.application.sorting import get_comparator, sort_records
    from catalog_query.application.listing import ListingQuery, run_listing
    from catalog_query.application.resources import PRODUCTS, ResourceTable
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
