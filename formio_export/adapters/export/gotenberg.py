"""
Gotenberg adapter for PDF generation.

Implements PdfRendererPort using the Gotenberg Docker API for HTML to PDF
conversion.
"""
import asyncio
import logging
from typing import Any, Dict, Optional

import requests

from formio_export.config.export_settings import (
    DEFAULT_MARGIN,
    DEFAULT_PAPER_HEIGHT,
    DEFAULT_PAPER_WIDTH,
    GOTENBERG_HEALTH_TIMEOUT_SECONDS,
    GOTENBERG_TIMEOUT_SECONDS,
    GOTENBERG_URL,
)
from formio_export.core.exceptions import RendererError
from formio_export.core.models.structure import RenderedDocument
from formio_export.core.ports.export import PdfRendererPort

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
DEFAULT_PDF_FILENAME = "export.pdf"


class GotenbergAdapter(PdfRendererPort):
    """
    Gotenberg implementation of PdfRendererPort.

    Uses Gotenberg Docker API for PDF generation via Chromium.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: int = GOTENBERG_TIMEOUT_SECONDS):
        """
        Initialize the Gotenberg adapter.

        Args:
            base_url: Gotenberg API URL (default: GOTENBERG_URL)
            timeout: Request timeout in seconds
        """
        self.base_url = base_url or GOTENBERG_URL
        self.timeout = timeout
        logger.info(f"Initialized GotenbergAdapter: {self.base_url}")

    async def health_check(self) -> bool:
        """Check if Gotenberg is available."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self._health_check_sync)

    def _health_check_sync(self) -> bool:
        """Synchronous health check."""
        try:
            response = requests.get(
                f"{self.base_url}/health", timeout=GOTENBERG_HEALTH_TIMEOUT_SECONDS
            )
            return response.status_code == 200
        except requests.RequestException:
            return False

    async def render_pdf(self, config: Dict[str, Any]) -> RenderedDocument:
        """Convert ``config["source"]`` HTML to PDF."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self._render_pdf_sync, config)

    @staticmethod
    def _form_data(config: Dict[str, Any]) -> Dict[str, str]:
        """Map renderer config onto Gotenberg form fields."""
        data = {
            "marginTop": str(config.get("margin_top", DEFAULT_MARGIN)),
            "marginBottom": str(config.get("margin_bottom", DEFAULT_MARGIN)),
            "marginLeft": str(config.get("margin_left", DEFAULT_MARGIN)),
            "marginRight": str(config.get("margin_right", DEFAULT_MARGIN)),
            "paperWidth": str(config.get("paper_width", DEFAULT_PAPER_WIDTH)),
            "paperHeight": str(config.get("paper_height", DEFAULT_PAPER_HEIGHT)),
            "printBackground": str(config.get("print_background", True)).lower(),
        }
        if config.get("landscape"):
            data["landscape"] = "true"
        return data

    def _render_pdf_sync(self, config: Dict[str, Any]) -> RenderedDocument:
        """Synchronous HTML to PDF conversion."""
        source = config.get("source")
        if not source:
            raise RendererError("PDF rendering requires HTML source")

        filename = config.get("filename") or DEFAULT_PDF_FILENAME

        files = {
            "index.html": ("index.html", source, "text/html")
        }

        # Add header/footer if provided
        if config.get("header_html"):
            files["header.html"] = ("header.html", config["header_html"], "text/html")
        if config.get("footer_html"):
            files["footer.html"] = ("footer.html", config["footer_html"], "text/html")

        try:
            response = requests.post(
                f"{self.base_url}/forms/chromium/convert/html",
                files=files,
                data=self._form_data(config),
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Gotenberg HTML to PDF failed: {e}")
            raise RendererError(f"Gotenberg HTML to PDF failed: {e}") from e

        logger.info(f"Generated PDF: {filename} ({len(response.content)} bytes)")
        return RenderedDocument(
            filename=filename,
            content=response.content,
            media_type=PDF_MEDIA_TYPE,
        )


# Singleton instance
_adapter: Optional[GotenbergAdapter] = None


def get_gotenberg_adapter() -> GotenbergAdapter:
    """Get or create the Gotenberg adapter singleton."""
    global _adapter
    if _adapter is None:
        _adapter = GotenbergAdapter()
    return _adapter
