"""Application-layer errors — session and access concerns."""

from __future__ import annotations

from typing import Any

from catalog_query.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """No active session."""

    default_code = "unauthorized"


class ForbiddenError(ApplicationError):
    """The active session lacks the required role."""

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        role: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.role = role


__all__ = [
    "ApplicationError",
    "ForbiddenError",
    "UnauthorizedError",
]
