"""Application export – ExportService dispatches to the right exporter."""
from __future__ import annotations

import json
import time
from typing import Any

from catalog_query.application.export.csv_export import CsvExporter
from catalog_query.application.export.excel_export import ExcelExporter
from catalog_query.application.export.request import ExportRequest
from catalog_query.kernel.errors import ValidationError
from catalog_query.kernel.records import get_field
from catalog_query.observability.logging import get_logger

__all__ = ["MIME_TYPES", "ExportService"]

logger = get_logger(__name__)

MIME_TYPES: dict[str, str] = {
    "csv": "text/csv",
    "json": "application/json",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}


class ExportService:
    """Dispatches an ExportRequest to the appropriate exporter."""

    def __init__(self, *, bom: bool = False) -> None:
        self._csv_exporter = CsvExporter(bom=bom)
        self._excel_exporter = ExcelExporter()

    async def export(self, request: ExportRequest) -> bytes:
        start = time.monotonic()
        result: bytes

        if request.format == "csv":
            result = await self._csv_exporter.export(request)
        elif request.format == "xlsx":
            result = await self._excel_exporter.export(request)
        elif request.format == "json":
            result = await self._export_json(request)
        else:
            raise ValidationError.for_field("format", request.format, f"Unsupported export format: {request.format!r}")

        logger.debug(
            "export.completed",
            format=request.format,
            filename=request.filename,
            size=len(result),
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )
        return result

    @staticmethod
    async def _export_json(request: ExportRequest) -> bytes:
        rows: list[dict[str, Any]] = []
        async for row in request.rows:
            rows.append({col.key: get_field(row, col.key) for col in request.columns})
        return json.dumps(rows, default=str, ensure_ascii=False).encode("utf-8")
