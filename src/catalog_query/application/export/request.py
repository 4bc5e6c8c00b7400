"""Application export – ExportRequest, ColumnDef and cell rendering."""
from __future__ import annotations

from collections.abc import AsyncIterator, Iterable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Literal

from catalog_query.application.i18n import DEFAULT_LOCALE, format_currency
from catalog_query.kernel.records import get_field, to_datetime

__all__ = [
    "ColumnDef",
    "ExportFormat",
    "ExportRequest",
    "headers",
    "render_cell",
    "rendered_rows",
    "rows_from",
]

ExportFormat = Literal["csv", "xlsx", "json"]

_SCALARS = (str, int, float, Decimal, bool, date)


@dataclass(frozen=True)
class ColumnDef:
    """Defines a single column in an export."""

    key: str          # dotted field path read from each record
    header: str       # column header text
    format: str = ""  # "", "currency" or "date"


@dataclass
class ExportRequest:
    """Describes a data export to be performed."""

    columns: list[ColumnDef]
    rows: AsyncIterator[Any]
    format: ExportFormat
    filename: str = "export"
    locale: str = DEFAULT_LOCALE


def render_cell(record: Any, column: ColumnDef, locale: str = DEFAULT_LOCALE) -> Any:
    """Value of *column* for *record*, formatted for a spreadsheet cell."""
    value = get_field(record, column.key)
    if value is None:
        return ""
    if column.format == "currency" and isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_currency(value, locale)
    if column.format == "date":
        moment = to_datetime(value)
        return moment.date().isoformat() if moment is not None else ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, _SCALARS):
        return value
    return str(value)


def headers(request: ExportRequest) -> list[str]:
    return [column.header for column in request.columns]


async def rendered_rows(request: ExportRequest) -> AsyncIterator[list[Any]]:
    """Yield one list of rendered cells per record of *request*."""
    async for record in request.rows:
        yield [render_cell(record, column, request.locale) for column in request.columns]


async def rows_from(records: Iterable[Any]) -> AsyncIterator[Any]:
    """Adapt an in-memory collection (e.g. ``ResultSet.items``) to export rows."""
    for record in records:
        yield record
