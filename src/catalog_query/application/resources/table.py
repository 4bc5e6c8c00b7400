"""Application resources – ResourceTable, the generic admin listing."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from catalog_query.application.listing import ListingQuery, ResultSet, run_listing
from catalog_query.application.resources.defaults import ListingDefaults
from catalog_query.application.resources.schema import ResourceSchema
from catalog_query.kernel.errors import NotFoundError
from catalog_query.kernel.records import get_field
from catalog_query.kernel.time import Clock, SystemClock
from catalog_query.observability.logging import get_logger

T = TypeVar("T")

__all__ = ["ResourceTable"]

logger = get_logger(__name__)


class ResourceTable(Generic[T]):
    """Owns the source collection of one admin listing.

    The table is the only writer of its records (fetch completion, user
    edits); every view it hands out is a freshly derived :class:`ResultSet`.
    """

    def __init__(
        self,
        schema: ResourceSchema,
        records: Iterable[T] | None = None,
        *,
        clock: Clock | None = None,
        defaults: ListingDefaults | None = None,
    ) -> None:
        self._schema = schema
        self._clock: Clock = clock or SystemClock()
        self._defaults = defaults or ListingDefaults()
        self._records: list[T] = list(records or [])

    @property
    def schema(self) -> ResourceSchema:
        return self._schema

    @property
    def defaults(self) -> ListingDefaults:
        return self._defaults

    @property
    def records(self) -> tuple[T, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def _index_of(self, identifier: Any) -> int:
        for index, record in enumerate(self._records):
            if get_field(record, self._schema.id_field) == identifier:
                return index
        return -1

    # Source mutations --------------------------------------------------
    def replace_all(self, records: Iterable[T] | None) -> None:
        """Swap in a freshly fetched collection; ``None`` becomes empty."""
        self._records = list(records or [])
        logger.info("resource.loaded", resource=self._schema.name, count=len(self._records))

    def upsert(self, record: T) -> bool:
        """Insert *record* or replace the one with the same id. Returns ``True`` on insert."""
        identifier = get_field(record, self._schema.id_field)
        index = self._index_of(identifier) if identifier is not None else -1
        if index < 0:
            self._records.append(record)
            logger.debug("resource.inserted", resource=self._schema.name, id=identifier)
            return True
        self._records[index] = record
        logger.debug("resource.updated", resource=self._schema.name, id=identifier)
        return False

    def get(self, identifier: Any) -> T:
        index = self._index_of(identifier)
        if index < 0:
            raise NotFoundError(self._schema.name, identifier)
        return self._records[index]

    def remove(self, identifier: Any) -> T:
        index = self._index_of(identifier)
        if index < 0:
            raise NotFoundError(self._schema.name, identifier)
        removed = self._records.pop(index)
        logger.debug("resource.removed", resource=self._schema.name, id=identifier)
        return removed

    # Views -------------------------------------------------------------
    def query(self, query: ListingQuery) -> ResultSet[T]:
        return run_listing(
            self._records,
            query,
            search_fields=self._schema.search_fields,
            registry=self._schema.registry,
        )

    def view(self, params: Mapping[str, Any] | None = None) -> ResultSet[T]:
        """Derive the listing for request-style *params* (see ``query_from_params``)."""
        return self.query(self._schema.query_from_params(params or {}, self._clock, self._defaults))

    def top(self, params: Mapping[str, Any] | None = None, n: int | None = None) -> list[T]:
        """First *n* (default ``top_n``) records of the filtered, sorted view, ignoring paging."""
        query = self._schema.query_from_params(params or {}, self._clock, self._defaults)
        limit = self._defaults.top_n if n is None else n
        return self.query(dataclasses.replace(query, offset=0, limit=limit)).items
