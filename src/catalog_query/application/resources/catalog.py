"""Application resources – built-in schemas for the storefront listings."""
from __future__ import annotations

from typing import Any

from catalog_query.application.filtering import FilterCriterion
from catalog_query.application.resources.schema import FilterBinding, ResourceSchema
from catalog_query.application.sorting import ComparatorRegistry, SortKey
from catalog_query.kernel.records import get_field

__all__ = [
    "ACTIVITY_LOGS",
    "API_LOGS",
    "INVENTORY",
    "PRODUCTS",
    "REVIEWS",
    "ROLES",
    "SCHEMAS",
    "TRANSACTIONS",
    "effective_price",
]


def effective_price(product: Any) -> Any:
    """Bracket price of a product: ``originalPrice`` while on sale, else ``price``."""
    original = get_field(product, "originalPrice")
    if get_field(product, "onSale") and original:
        return original
    return get_field(product, "price")


PRODUCTS = ResourceSchema(
    name="product",
    search_fields=("name", "description", "tags", "categoryName"),
    filters={
        "category": FilterBinding("categoryId"),
        "price": FilterBinding(effective_price, "price_bracket"),
        "color": FilterBinding("colors", "any_of", match="contains"),
        "featured": FilterBinding("isFeatured", "flag"),
        "active": FilterBinding("isActive", "flag"),
    },
    registry=ComparatorRegistry(price_field=effective_price),
    default_sort=SortKey.NEWEST.value,
)

ACTIVITY_LOGS = ResourceSchema(
    name="activity_log",
    search_fields=("action", "userName", "details"),
    filters={
        "category": FilterBinding("category"),
        "severity": FilterBinding("severity"),
        "dateRange": FilterBinding("timestamp", "date_window"),
    },
    registry=ComparatorRegistry(name_field="action", created_field="timestamp"),
    default_sort=SortKey.NEWEST.value,
)

INVENTORY = ResourceSchema(
    name="inventory_item",
    search_fields=("productName", "productNameEn", "productNameJa", "sku", "location"),
    filters={
        "status": FilterBinding("status"),
        "category": FilterBinding("category"),
    },
    registry=ComparatorRegistry(price_field="unitCost", name_field="productName"),
)

API_LOGS = ResourceSchema(
    name="api_log",
    search_fields=("endpoint", "method", "ipAddress", "apiKey"),
    filters={
        "status": FilterBinding("statusCode", "status_class"),
        "method": FilterBinding("method"),
    },
    registry=ComparatorRegistry(name_field="endpoint", created_field="timestamp"),
    default_sort=SortKey.NEWEST.value,
)

REVIEWS = ResourceSchema(
    name="review",
    search_fields=("title", "comment", "userId.name", "productId.name"),
    filters={
        "rating": FilterBinding("rating", "number"),
        "verified": FilterBinding("verified", "flag"),
        "status": FilterBinding("status"),
    },
    registry=ComparatorRegistry(name_field="title"),
    default_sort=SortKey.NEWEST.value,
)

ROLES = ResourceSchema(
    name="role",
    search_fields=("name", "nameEn", "nameJa", "description"),
    filters={
        "status": FilterBinding(
            "isActive",
            "choice",
            choices={
                "active": FilterCriterion.equals("isActive", True),
                "inactive": FilterCriterion.equals("isActive", False),
                "system": FilterCriterion.equals("isSystem", True),
                "userCreated": FilterCriterion.equals("isSystem", False),
            },
        ),
        "level": FilterBinding("level", "minimum"),
    },
)

TRANSACTIONS = ResourceSchema(
    name="transaction",
    search_fields=("orderNumber", "transactionId", "customerName", "customerEmail"),
    filters={
        "status": FilterBinding("status"),
        "method": FilterBinding("paymentMethod"),
        "dateRange": FilterBinding("createdAt", "date_window"),
    },
    registry=ComparatorRegistry(price_field="amount", name_field="customerName"),
    default_sort=SortKey.NEWEST.value,
)

SCHEMAS: dict[str, ResourceSchema] = {
    schema.name: schema
    for schema in (PRODUCTS, ACTIVITY_LOGS, INVENTORY, API_LOGS, REVIEWS, ROLES, TRANSACTIONS)
}
