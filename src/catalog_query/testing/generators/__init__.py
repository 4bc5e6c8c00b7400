"""Testing generators – Hypothesis strategies for listing records."""
from catalog_query.testing.generators.strategies import (
    criteria_strategy,
    product_strategy,
    products_strategy,
)

__all__ = ["criteria_strategy", "product_strategy", "products_strategy"]
