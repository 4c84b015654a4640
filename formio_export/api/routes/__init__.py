"""API routers."""
from formio_export.api.routes.export import create_export_router
from formio_export.api.routes.health import create_health_router

__all__ = ["create_export_router", "create_health_router"]
