"""Application export – CSV rendering of a listing."""
from __future__ import annotations

import csv
import io

from catalog_query.application.export.request import ExportRequest, headers, rendered_rows

__all__ = ["CsvExporter"]

_BOM = "\ufeff"


class CsvExporter:
    """Renders an export request as UTF-8 CSV.

    With ``bom=True`` the output starts with a byte-order mark; spreadsheet
    apps need it to read Vietnamese and Japanese text as UTF-8.
    """

    def __init__(self, delimiter: str = ",", *, bom: bool = False, line_terminator: str = "\r\n") -> None:
        self._delimiter = delimiter
        self._bom = bom
        self._line_terminator = line_terminator

    async def export(self, request: ExportRequest) -> bytes:
        out = io.StringIO(newline="")
        writer = csv.writer(out, delimiter=self._delimiter, lineterminator=self._line_terminator)
        writer.writerow(headers(request))
        async for cells in rendered_rows(request):
            writer.writerow(cells)
        text = out.getvalue()
        return (_BOM + text if self._bom else text).encode("utf-8")
