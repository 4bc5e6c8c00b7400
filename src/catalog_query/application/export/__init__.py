"""Application export – CSV/Excel/JSON export of listings and export jobs."""
from catalog_query.application.export.csv_export import CsvExporter
from catalog_query.application.export.excel_export import ExcelExporter, sheet_title
from catalog_query.application.export.export_service import MIME_TYPES, ExportService
from catalog_query.application.export.jobs import ExportJob, ExportJobManager, JobStatus
from catalog_query.application.export.request import (
    ColumnDef,
    ExportFormat,
    ExportRequest,
    render_cell,
    rows_from,
)

__all__ = [
    "MIME_TYPES",
    "ColumnDef",
    "CsvExporter",
    "ExcelExporter",
    "ExportFormat",
    "ExportJob",
    "ExportJobManager",
    "ExportRequest",
    "ExportService",
    "JobStatus",
    "render_cell",
    "rows_from",
    "sheet_title",
]
