"""Abstract interfaces for external dependencies."""
from formio_export.core.ports.components import ComponentFactoryPort
from formio_export.core.ports.export import (
    HtmlRendererPort,
    PdfRendererPort,
    XlsxRendererPort,
)

__all__ = [
    "ComponentFactoryPort",
    "HtmlRendererPort",
    "PdfRendererPort",
    "XlsxRendererPort",
]
