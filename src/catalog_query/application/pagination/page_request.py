"""Application pagination – PageRequest."""
from __future__ import annotations

import dataclasses
from typing import Any

from catalog_query.kernel.errors import ValidationError

MAX_PAGE_SIZE = 1000


def _int_or(name: str, raw: Any, default: int) -> int:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError.for_field(name, raw, f"{name} must be an integer", cause=exc) from exc


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """A 1-based page number and page size, as sent by listing screens."""

    page: int = 1
    size: int = 20

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError.for_field("page", self.page, "page must be >= 1")
        if not 1 <= self.size <= MAX_PAGE_SIZE:
            raise ValidationError.for_field("size", self.size, f"size must be in 1..{MAX_PAGE_SIZE}")

    @classmethod
    def parse(cls, page: Any = None, size: Any = None, *, default_size: int = 20) -> "PageRequest":
        """Build from raw request values; blanks fall back to page 1 / *default_size*."""
        return cls(page=_int_or("page", page, 1), size=_int_or("size", size, default_size))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @property
    def limit(self) -> int:
        return self.size


__all__ = ["MAX_PAGE_SIZE", "PageRequest"]
