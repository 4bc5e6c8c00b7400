"""Application resources – schema-driven admin listings."""
from catalog_query.application.resources.catalog import (
    ACTIVITY_LOGS,
    API_LOGS,
    INVENTORY,
    PRODUCTS,
    REVIEWS,
    ROLES,
    SCHEMAS,
    TRANSACTIONS,
    effective_price,
)
from catalog_query.application.resources.defaults import ListingDefaults
from catalog_query.application.resources.schema import BindingKind, FilterBinding, ResourceSchema
from catalog_query.application.resources.table import ResourceTable

__all__ = [
    "ACTIVITY_LOGS",
    "API_LOGS",
    "INVENTORY",
    "PRODUCTS",
    "REVIEWS",
    "ROLES",
    "SCHEMAS",
    "TRANSACTIONS",
    "BindingKind",
    "FilterBinding",
    "ListingDefaults",
    "ResourceSchema",
    "ResourceTable",
    "effective_price",
]
