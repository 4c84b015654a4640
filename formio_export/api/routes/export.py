"""Export routes for HTML, PDF and XLSX"""
import logging
import re
from typing import Any, Dict
from urllib.parse import quote

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, Response

from formio_export.api.schemas import ExportRequest
from formio_export.core import exporter
from formio_export.core.models.structure import RenderedDocument

logger = logging.getLogger(__name__)


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback and an RFC 5987 filename."""
    fallback = re.sub(r"[^A-Za-z0-9._-]", "_", filename) or "export"
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def _document_response(document: RenderedDocument) -> Response:
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": content_disposition(document.filename)},
    )


def create_export_router(adapters: Dict[str, Any]) -> APIRouter:
    """Create export router.

    Args:
        adapters: Port overrides passed through to FormioExport

    Returns:
        FastAPI router with export endpoints
    """
    router = APIRouter(prefix="/api/v1/export")

    @router.post("/html", response_class=HTMLResponse)
    async def export_html(request: ExportRequest):
        """Render submissions to HTML"""
        html = await exporter.to_html(request.to_options(), **adapters)
        return HTMLResponse(content=html)

    @router.post("/pdf")
    async def export_pdf(request: ExportRequest):
        """Render submissions to PDF"""
        document = await exporter.to_pdf(request.to_options(), **adapters)
        logger.info(f"PDF export ready: {document.filename}")
        return _document_response(document)

    @router.post("/xlsx")
    async def export_xlsx(request: ExportRequest):
        """Build a spreadsheet from the request config"""
        document = await exporter.to_xlsx(request.to_options(), **adapters)
        logger.info(f"XLSX export ready: {document.filename}")
        return _document_response(document)

    return router
