"""Application listing – ResultSet generic container."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

__all__ = ["ResultSet"]


@dataclass(frozen=True)
class ResultSet(Generic[T]):
    """The derived, renderable view of a source collection.

    ``total`` counts the source collection, ``matched`` the records that
    passed filtering, ``items`` the projected window.
    """
    items: list[T]
    total: int
    matched: int
    offset: int = 0
    limit: int | None = None

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.items) < self.matched

    def __len__(self) -> int:
        return len(self.items)
