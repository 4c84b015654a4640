"""Export format adapters (HTML, PDF, XLSX)."""
from formio_export.adapters.export.gotenberg import GotenbergAdapter, get_gotenberg_adapter
from formio_export.adapters.export.html_renderer import StructureHtmlRenderer
from formio_export.adapters.export.xlsx_renderer import OpenpyxlXlsxRenderer

__all__ = [
    "GotenbergAdapter",
    "get_gotenberg_adapter",
    "StructureHtmlRenderer",
    "OpenpyxlXlsxRenderer",
]
