"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── NotFoundError
    └── ApplicationError     (application.py)
        ├── UnauthorizedError
        └── ForbiddenError

Configuration errors (``catalog_query.config.validation``) derive from
``ApplicationError``.
"""

from catalog_query.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    UnauthorizedError,
)
from catalog_query.kernel.errors.base import BaseError
from catalog_query.kernel.errors.domain import (
    DomainError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ForbiddenError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
]
