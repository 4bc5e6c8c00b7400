"""Domain errors — invalid listing input and missing records."""

from __future__ import annotations

from typing import Any

from catalog_query.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a listing rule is violated by the caller."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    @classmethod
    def for_field(cls, field: str, value: Any, message: str, **kwargs: Any) -> "ValidationError":
        """Single-field failure, e.g. a non-numeric ``limit`` request parameter."""
        return cls(message, errors=[{"field": field, "value": value}], **kwargs)

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """The requested record does not exist in the source collection."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        kwargs.setdefault("detail", {"resource": resource, "identifier": identifier})
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


__all__ = [
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
