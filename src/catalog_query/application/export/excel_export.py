"""Application export – single-sheet .xlsx rendering of a listing."""
from __future__ import annotations

import io
import re

import openpyxl
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from catalog_query.application.export.request import ExportRequest, headers, rendered_rows

__all__ = ["ExcelExporter", "sheet_title"]

_INVALID_TITLE_CHARS = re.compile(r"[\[\]:*?/\\]")
_MAX_TITLE = 31
_MAX_WIDTH = 50
_HEADER_FONT = Font(bold=True)


def sheet_title(filename: str) -> str:
    """Excel-safe sheet title derived from the export filename."""
    title = _INVALID_TITLE_CHARS.sub("_", filename).strip()
    return title[:_MAX_TITLE] or "Sheet1"


class ExcelExporter:
    """Writes the listing to one worksheet with a bold, frozen header row.

    Column widths follow the longest rendered value, capped at 50.
    """

    async def export(self, request: ExportRequest) -> bytes:
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = sheet_title(request.filename)

        header = headers(request)
        ws.append(header)
        for cell in ws[1]:
            cell.font = _HEADER_FONT
        ws.freeze_panes = "A2"

        widths = [len(text) for text in header]
        async for cells in rendered_rows(request):
            ws.append(cells)
            widths = [max(width, len(str(cell))) for width, cell in zip(widths, cells)]

        for index, width in enumerate(widths, start=1):
            ws.column_dimensions[get_column_letter(index)].width = min(width + 2, _MAX_WIDTH)

        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()
