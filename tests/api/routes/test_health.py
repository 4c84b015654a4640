"""Tests for health check routes"""
import time

from fastapi import FastAPI
from fastapi.testclient import TestClient

from formio_export.api.routes.health import create_health_router


def make_client(**kwargs):
    app = FastAPI()
    app.include_router(create_health_router(start_time=time.time(), **kwargs))
    return TestClient(app)


class TestHealthRoutes:
    """Test health check and format endpoints"""

    def test_health_check_returns_healthy(self):
        """Should return healthy status"""
        response = make_client().get("/api/v1/export/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "uptime" in data
        assert "version" in data
        assert data["pdf_backend_available"] is False

    def test_health_check_reports_pdf_backend(self):
        """Should report PDF backend availability"""
        async def backend_up():
            return True

        response = make_client(pdf_backend_check=backend_up).get("/api/v1/export/health")

        assert response.json()["pdf_backend_available"] is True

    def test_supported_formats_endpoint(self):
        """Should list html, pdf and xlsx"""
        response = make_client().get("/api/v1/export/formats")

        assert response.status_code == 200
        formats = [f["format"] for f in response.json()["formats"]]
        assert formats == ["html", "pdf", "xlsx"]
