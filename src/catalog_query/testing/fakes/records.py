"""Testing fakes – sample storefront records shaped like the API payloads."""
from __future__ import annotations

import itertools
from datetime import datetime
from typing import Any

from catalog_query.testing.fakes.clock import FAKE_NOW

_ids = itertools.count(1)


def make_product(name: str = "Kimono Traditional", price: int = 300000, **overrides: Any) -> dict[str, Any]:
    product: dict[str, Any] = {
        "_id": f"p{next(_ids)}",
        "name": name,
        "description": "",
        "price": price,
        "originalPrice": None,
        "onSale": False,
        "categoryId": "c1",
        "colors": [],
        "tags": [],
        "isFeatured": False,
        "isActive": True,
        "createdAt": FAKE_NOW.isoformat(),
    }
    product.update(overrides)
    return product


def make_activity(
    action: str = "login",
    timestamp: datetime = FAKE_NOW,
    **overrides: Any,
) -> dict[str, Any]:
    activity: dict[str, Any] = {
        "_id": f"a{next(_ids)}",
        "action": action,
        "category": "auth",
        "severity": "info",
        "userName": "admin",
        "details": "",
        "timestamp": timestamp.isoformat(),
    }
    activity.update(overrides)
    return activity


__all__ = ["make_activity", "make_product"]
