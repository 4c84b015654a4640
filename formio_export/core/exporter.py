"""
FormioExport - export form.io submissions to HTML, PDF and XLSX.

Builds the render structure once at construction and chains the renderer
ports. The module-level ``to_html``/``to_pdf``/``to_xlsx`` coroutines are
one-shot wrappers that validate an options mapping first.

Usage:
    exporter = FormioExport([
        {"component": form, "submission": submissions, "option": {}},
    ])
    html = await exporter.to_html()
    pdf = await exporter.to_pdf({"filename": "answers.pdf"})
"""
import logging
import uuid
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from formio_export.config.export_settings import (
    DEFAULT_FILENAME_PREFIX,
    RANDOM_SUFFIX_LENGTH,
)
from formio_export.core.builders.options_validator import PropertySpec, verify_properties
from formio_export.core.builders.structure_builder import build_structure
from formio_export.core.exceptions import ValidationError
from formio_export.core.models.structure import StructureEntry
from formio_export.core.ports.components import ComponentFactoryPort
from formio_export.core.ports.export import (
    HtmlRendererPort,
    PdfRendererPort,
    XlsxRendererPort,
)

logger = logging.getLogger(__name__)


def generate_filename(extension: str) -> str:
    """Random export filename, e.g. ``export-3f9a1c2.pdf``."""
    suffix = uuid.uuid4().hex[:RANDOM_SUFFIX_LENGTH]
    return f"{DEFAULT_FILENAME_PREFIX}-{suffix}.{extension}"


class FormioExport:
    """
    Export form.io components into different formats.

    Renderer ports are injected; any port left as None is created on first
    use from the bundled adapters.
    """

    def __init__(
        self,
        items: Optional[Iterable[Mapping[str, Any]]] = None,
        component_factory: Optional[ComponentFactoryPort] = None,
        html_renderer: Optional[HtmlRendererPort] = None,
        pdf_renderer: Optional[PdfRendererPort] = None,
        xlsx_renderer: Optional[XlsxRendererPort] = None,
    ):
        """
        Build the render structure.

        Args:
            items: Export items ``{"component", "submission", "option"}``
            component_factory: Factory producing StructureEntry objects
            html_renderer: HTML renderer port
            pdf_renderer: PDF renderer port
            xlsx_renderer: XLSX renderer port
        """
        self._component_factory = component_factory
        self._html_renderer = html_renderer
        self._pdf_renderer = pdf_renderer
        self._xlsx_renderer = xlsx_renderer

        self.structure: Tuple[StructureEntry, ...] = tuple(
            build_structure(items or [], self.component_factory)
        )

    @property
    def component_factory(self) -> ComponentFactoryPort:
        if self._component_factory is None:
            from formio_export.adapters.components.factory import DefaultComponentFactory
            self._component_factory = DefaultComponentFactory()
        return self._component_factory

    @property
    def html_renderer(self) -> HtmlRendererPort:
        if self._html_renderer is None:
            from formio_export.adapters.export.html_renderer import StructureHtmlRenderer
            self._html_renderer = StructureHtmlRenderer()
        return self._html_renderer

    @property
    def pdf_renderer(self) -> PdfRendererPort:
        if self._pdf_renderer is None:
            from formio_export.adapters.export.gotenberg import get_gotenberg_adapter
            self._pdf_renderer = get_gotenberg_adapter()
        return self._pdf_renderer

    @property
    def xlsx_renderer(self) -> XlsxRendererPort:
        if self._xlsx_renderer is None:
            from formio_export.adapters.export.xlsx_renderer import OpenpyxlXlsxRenderer
            self._xlsx_renderer = OpenpyxlXlsxRenderer()
        return self._xlsx_renderer

    async def to_html(self) -> str:
        """Render the structure to HTML."""
        return await self.html_renderer.render_html(list(self.structure))

    async def to_pdf(self, config: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Render the structure to HTML, then convert it to PDF.

        Args:
            config: PDF renderer configuration; not modified

        Returns:
            Whatever the PDF renderer returns
        """
        source = await self.to_html()
        pdf_config = {**(config or {}), "source": source}
        return await self.pdf_renderer.render_pdf(pdf_config)

    async def to_xlsx(self, config: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Build a spreadsheet from config alone.

        The structure is not consulted; the XLSX renderer works from the
        columns and rows given in config.
        """
        return await self.xlsx_renderer.render_xlsx(dict(config or {}))


HTML_SCHEMA = {
    "component": PropertySpec(type=dict, required=True),
    "formio": PropertySpec(type=dict),
}

PDF_SCHEMA = {
    "component": PropertySpec(type=dict, required=True),
    "formio": PropertySpec(type=dict),
    "config": PropertySpec(type=dict, default=lambda: {"filename": generate_filename("pdf")}),
}

XLSX_SCHEMA = {
    "component": PropertySpec(type=dict, required=True),
    "formio": PropertySpec(type=dict),
    "config": PropertySpec(type=dict, default=lambda: {"filename": generate_filename("xlsx")}),
}


def _validate(options: Optional[Mapping[str, Any]], schema: Mapping[str, PropertySpec]) -> Dict[str, Any]:
    try:
        return verify_properties(options, schema)
    except ValidationError as e:
        logger.error(f"Invalid export options: {e}")
        raise


def _export_items(options: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """Single export item from one-shot options."""
    data = options.get("data")
    if data is None:
        data = [{"data": {}}]
    return [{
        "component": options["component"],
        "submission": data,
        "option": options.get("formio") or {},
    }]


async def to_html(options: Optional[Mapping[str, Any]], **adapters: Any) -> str:
    """
    One-shot HTML export.

    Args:
        options: ``{"component", "data", "formio"}``; component is required
        **adapters: Port overrides passed to FormioExport

    Returns:
        HTML source
    """
    options = _validate(options, HTML_SCHEMA)
    return await FormioExport(_export_items(options), **adapters).to_html()


async def to_pdf(options: Optional[Mapping[str, Any]], **adapters: Any) -> Any:
    """One-shot PDF export; config defaults to a random ``.pdf`` filename."""
    options = _validate(options, PDF_SCHEMA)
    return await FormioExport(_export_items(options), **adapters).to_pdf(options["config"])


async def to_xlsx(options: Optional[Mapping[str, Any]], **adapters: Any) -> Any:
    """One-shot XLSX export; config defaults to a random ``.xlsx`` filename."""
    options = _validate(options, XLSX_SCHEMA)
    return await FormioExport(_export_items(options), **adapters).to_xlsx(options["config"])
