"""
form.io export

Normalizes form.io component/submission pairs and hands them to HTML, PDF
and XLSX renderers.
"""
from formio_export.core.exporter import FormioExport, to_html, to_pdf, to_xlsx

__version__ = "1.0.0"

__all__ = ["FormioExport", "to_html", "to_pdf", "to_xlsx"]
