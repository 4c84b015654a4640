#!/usr/bin/env python3
"""
REST API for form.io submission export.

Wraps the one-shot export entry points in HTTP endpoints.
"""
import logging
import time
from datetime import datetime
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from formio_export import __version__
from formio_export.api.routes.export import create_export_router
from formio_export.api.routes.health import create_health_router
from formio_export.api.schemas import ErrorResponse
from formio_export.core.exceptions import MissingRequiredFieldError, RendererError, ValidationError
from formio_export.core.ports.components import ComponentFactoryPort
from formio_export.core.ports.export import HtmlRendererPort, PdfRendererPort, XlsxRendererPort

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


class ExportAPI:
    """Export API with injectable renderer ports"""

    def __init__(
        self,
        component_factory: Optional[ComponentFactoryPort] = None,
        html_renderer: Optional[HtmlRendererPort] = None,
        pdf_renderer: Optional[PdfRendererPort] = None,
        xlsx_renderer: Optional[XlsxRendererPort] = None,
    ):
        """Initialize API with dependency injection.

        Args:
            component_factory: Component factory (default: DefaultComponentFactory)
            html_renderer: HTML renderer (default: StructureHtmlRenderer)
            pdf_renderer: PDF renderer (default: GotenbergAdapter)
            xlsx_renderer: XLSX renderer (default: OpenpyxlXlsxRenderer)
        """
        self.adapters = {
            name: port
            for name, port in (
                ("component_factory", component_factory),
                ("html_renderer", html_renderer),
                ("pdf_renderer", pdf_renderer),
                ("xlsx_renderer", xlsx_renderer),
            )
            if port is not None
        }
        self.pdf_renderer = pdf_renderer

        # Start time for uptime
        self.start_time = time.time()

        self.app = FastAPI(
            title="form.io Export API",
            description="Export form.io submissions to HTML, PDF and XLSX",
            version=__version__,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        self._setup_middleware()
        self._setup_routes()
        self._setup_error_handlers()

    def _setup_middleware(self):
        """Setup API middleware"""
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        @self.app.middleware("http")
        async def log_requests(request, call_next):
            start_time = time.time()
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                f"{request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s"
            )

            return response

    async def _pdf_backend_available(self) -> bool:
        renderer = self.pdf_renderer
        if renderer is None:
            from formio_export.adapters.export.gotenberg import get_gotenberg_adapter
            renderer = get_gotenberg_adapter()
        health_check = getattr(renderer, "health_check", None)
        if health_check is None:
            return True
        return await health_check()

    def _setup_routes(self):
        """Setup API routes"""
        @self.app.get("/")
        async def root():
            return {
                "service": "form.io Export API",
                "version": __version__,
                "status": "operational",
                "docs": "/docs",
            }

        self.app.include_router(create_health_router(
            start_time=self.start_time,
            pdf_backend_check=self._pdf_backend_available,
        ))
        self.app.include_router(create_export_router(self.adapters))

    def _setup_error_handlers(self):
        """Setup error handlers"""
        @self.app.exception_handler(ValidationError)
        async def validation_error_handler(request: Request, exc: ValidationError):
            details = None
            if isinstance(exc, MissingRequiredFieldError):
                details = {"field": exc.field}
            return JSONResponse(
                status_code=400,
                content=ErrorResponse(
                    error="INVALID_OPTIONS",
                    message=str(exc),
                    details=details,
                    timestamp=datetime.now(),
                ).model_dump(mode="json"),
            )

        @self.app.exception_handler(RendererError)
        async def renderer_error_handler(request: Request, exc: RendererError):
            logger.error(f"Renderer failed: {exc}")
            return JSONResponse(
                status_code=502,
                content=ErrorResponse(
                    error="RENDERER_FAILED",
                    message=str(exc),
                    timestamp=datetime.now(),
                ).model_dump(mode="json"),
            )


# FastAPI app factory
def create_app(**adapters) -> FastAPI:
    """Create FastAPI application"""
    api = ExportAPI(**adapters)
    return api.app


# CLI entry point
if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="form.io Export API")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    args = parser.parse_args()

    uvicorn.run(
        "formio_export.api.export_api:create_app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        factory=True,
    )
