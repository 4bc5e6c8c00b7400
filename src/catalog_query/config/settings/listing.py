"""Config settings – ListingSettings."""
from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from catalog_query.application.i18n import SUPPORTED_LOCALES, ResourceBundle
from catalog_query.application.pagination import MAX_PAGE_SIZE
from catalog_query.application.resources import ListingDefaults, ResourceSchema, ResourceTable
from catalog_query.application.sorting import SortKey
from catalog_query.config.settings.base import Settings
from catalog_query.config.validation import InvalidSettingValueError
from catalog_query.kernel.time import SystemClock
from catalog_query.observability.logging import JsonLoggerFactory

_SORT_KEYS = frozenset(key.value for key in SortKey)


@dataclasses.dataclass
class ListingSettings(Settings):
    """Defaults shared by every listing (``LISTING_*`` environment variables).

    ``timezone`` decides where "today" and the other date windows start; the
    storefront runs on ``Asia/Ho_Chi_Minh``.
    """

    _prefix: dataclasses.ClassVar[str] = "LISTING"

    default_locale: str = "vi"
    default_page_size: int = 20
    max_page_size: int = MAX_PAGE_SIZE
    top_n: int = 8
    default_sort: str = SortKey.NEWEST.value
    timezone: str = "UTC"
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.default_locale not in SUPPORTED_LOCALES:
            raise InvalidSettingValueError(
                "default_locale", self.default_locale, f"expected one of {', '.join(SUPPORTED_LOCALES)}"
            )
        if not 1 <= self.max_page_size <= MAX_PAGE_SIZE:
            raise InvalidSettingValueError("max_page_size", self.max_page_size, f"must be in 1..{MAX_PAGE_SIZE}")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise InvalidSettingValueError(
                "default_page_size", self.default_page_size, "must be between 1 and max_page_size"
            )
        if self.top_n < 1:
            raise InvalidSettingValueError("top_n", self.top_n, "must be positive")
        if self.default_sort not in _SORT_KEYS:
            raise InvalidSettingValueError("default_sort", self.default_sort, "unknown sort key")
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise InvalidSettingValueError("timezone", self.timezone, "unknown IANA timezone") from exc
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")

    def clock(self) -> SystemClock:
        """Wall clock in the configured store timezone."""
        return SystemClock(ZoneInfo(self.timezone))

    def defaults(self) -> ListingDefaults:
        return ListingDefaults(
            page_size=self.default_page_size,
            max_page_size=self.max_page_size,
            default_sort=self.default_sort,
            top_n=self.top_n,
        )

    def table(self, schema: ResourceSchema, records: Iterable[Any] | None = None) -> ResourceTable[Any]:
        """A :class:`ResourceTable` paging, sorting and dating by these settings."""
        return ResourceTable(schema, records, clock=self.clock(), defaults=self.defaults())

    def bundle(self, messages: Mapping[str, Mapping[str, str]] | None = None) -> ResourceBundle:
        """Message bundle falling back to ``default_locale``."""
        return ResourceBundle(messages, default_locale=self.default_locale)

    def configure_logging(self, *, include_session: bool = True) -> None:
        JsonLoggerFactory.configure(self.log_level, include_session=include_session)


__all__ = ["ListingSettings"]
