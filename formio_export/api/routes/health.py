"""Health check routes"""
import time
from datetime import datetime
from typing import Callable, Optional

from fastapi import APIRouter

from formio_export import __version__
from formio_export.api.schemas import HealthResponse


def create_health_router(
    start_time: float,
    pdf_backend_check: Optional[Callable] = None,
) -> APIRouter:
    """Create health check router.

    Args:
        start_time: Server start time for uptime calculation
        pdf_backend_check: Coroutine function reporting PDF backend availability

    Returns:
        FastAPI router with health endpoints
    """
    router = APIRouter()

    @router.get("/api/v1/export/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint"""
        pdf_available = await pdf_backend_check() if pdf_backend_check else False

        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(),
            version=__version__,
            uptime=time.time() - start_time,
            pdf_backend_available=pdf_available,
        )

    @router.get("/api/v1/export/formats")
    async def get_supported_formats():
        """Get supported export formats"""
        return {
            "formats": [
                {"format": "html", "media_type": "text/html", "requires_structure": True},
                {"format": "pdf", "media_type": "application/pdf", "requires_structure": True},
                {"format": "xlsx", "media_type": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", "requires_structure": False},
            ]
        }

    return router
