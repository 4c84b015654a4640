"""
XLSX renderer using openpyxl.

Implements XlsxRendererPort. The workbook is described entirely by the
renderer config:

    {"filename": "answers.xlsx",
     "sheet_name": "Submissions",
     "columns": ["name", "email"],
     "rows": [["Ann", "ann@example.com"], {"name": "Bob"}]}

or, for several worksheets, ``{"sheets": [{"name", "columns", "rows"}]}``.
Rows may be lists (positional) or dicts (matched against columns). When
columns are omitted they are taken from dict rows in first-seen key order.
"""
import asyncio
import io
import json
import logging
from typing import Any, Dict, List, Optional

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils.exceptions import IllegalCharacterError
from openpyxl.worksheet.worksheet import Worksheet

from formio_export.config.export_settings import DEFAULT_SHEET_NAME, MAX_SHEET_NAME_LENGTH
from formio_export.core.exceptions import RendererError
from formio_export.core.models.structure import RenderedDocument
from formio_export.core.ports.export import XlsxRendererPort

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
DEFAULT_XLSX_FILENAME = "export.xlsx"


def cell_value(value: Any) -> Any:
    """Coerce a submission value into something openpyxl can store."""
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, default=str)
    return value


def resolve_columns(columns: Optional[List[str]], rows: List[Any]) -> List[str]:
    """Explicit columns, else dict-row keys in first-seen order."""
    if columns:
        return list(columns)
    resolved: List[str] = []
    for row in rows:
        if isinstance(row, dict):
            for key in row:
                if key not in resolved:
                    resolved.append(key)
    return resolved


def row_values(row: Any, columns: List[str]) -> List[Any]:
    if isinstance(row, dict):
        return [cell_value(row.get(column)) for column in columns]
    return [cell_value(value) for value in row]


def write_row(ws: Worksheet, row_index: int, values: List[Any]) -> List[Any]:
    """Write values into one worksheet row.

    Strings starting with "=" are stored as text, never as formulas.
    """
    cells = []
    for column_index, value in enumerate(values, start=1):
        cell = ws.cell(row=row_index, column=column_index, value=value)
        if isinstance(value, str) and value.startswith("="):
            cell.data_type = "s"
        cells.append(cell)
    return cells


def sheet_specs(config: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Normalize single-sheet and multi-sheet configs to a sheet list."""
    if config.get("sheets"):
        return list(config["sheets"])
    return [{
        "name": config.get("sheet_name"),
        "columns": config.get("columns"),
        "rows": config.get("rows") or [],
    }]


class OpenpyxlXlsxRenderer(XlsxRendererPort):
    """Builds in-memory workbooks with openpyxl."""

    def __init__(self, bold_header: bool = True):
        self.bold_header = bold_header

    async def render_xlsx(self, config: Dict[str, Any]) -> RenderedDocument:
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self._render_xlsx_sync, config)

    def _render_xlsx_sync(self, config: Dict[str, Any]) -> RenderedDocument:
        filename = config.get("filename") or DEFAULT_XLSX_FILENAME

        try:
            wb = Workbook()
            wb.remove(wb.active)

            for index, spec in enumerate(sheet_specs(config)):
                self._write_sheet(wb, spec, index)

            buffer = io.BytesIO()
            wb.save(buffer)
        except (ValueError, TypeError, IllegalCharacterError) as e:
            logger.error(f"XLSX generation failed: {e}")
            raise RendererError(f"XLSX generation failed: {e}") from e

        content = buffer.getvalue()
        logger.info(f"Generated XLSX: {filename} ({len(content)} bytes)")
        return RenderedDocument(
            filename=filename,
            content=content,
            media_type=XLSX_MEDIA_TYPE,
        )

    def _write_sheet(self, wb: Workbook, spec: Dict[str, Any], index: int) -> None:
        name = spec.get("name") or (
            DEFAULT_SHEET_NAME if index == 0 else f"{DEFAULT_SHEET_NAME} {index + 1}"
        )
        ws = wb.create_sheet(title=str(name)[:MAX_SHEET_NAME_LENGTH])

        rows = list(spec.get("rows") or [])
        columns = resolve_columns(spec.get("columns"), rows)

        row_index = 0
        if columns:
            row_index += 1
            header = write_row(ws, row_index, columns)
            if self.bold_header:
                for cell in header:
                    cell.font = Font(bold=True)

        for row in rows:
            row_index += 1
            write_row(ws, row_index, row_values(row, columns))
