"""Tests for GotenbergAdapter implementing PdfRendererPort."""
import pytest
import requests
from unittest.mock import MagicMock, patch

from formio_export.adapters.export.gotenberg import GotenbergAdapter
from formio_export.core.exceptions import RendererError
from formio_export.core.ports.export import PdfRendererPort


class TestGotenbergAdapter:
    def test_implements_pdf_renderer_port(self):
        assert isinstance(GotenbergAdapter("http://gotenberg:3000"), PdfRendererPort)

    @pytest.mark.asyncio
    async def test_render_pdf_posts_source(self):
        response = MagicMock(content=b"%PDF-1.7 data")
        response.raise_for_status = MagicMock()
        adapter = GotenbergAdapter("http://gotenberg:3000", timeout=30)

        with patch("formio_export.adapters.export.gotenberg.requests.post", return_value=response) as post:
            document = await adapter.render_pdf({
                "source": "<html></html>",
                "filename": "answers.pdf",
                "margin_top": 1,
                "landscape": True,
            })

        assert document.filename == "answers.pdf"
        assert document.content == b"%PDF-1.7 data"
        assert document.media_type == "application/pdf"

        url = post.call_args[0][0]
        kwargs = post.call_args[1]
        assert url == "http://gotenberg:3000/forms/chromium/convert/html"
        assert kwargs["files"]["index.html"][1] == "<html></html>"
        assert kwargs["data"]["marginTop"] == "1"
        assert kwargs["data"]["landscape"] == "true"
        assert kwargs["data"]["printBackground"] == "true"
        assert kwargs["timeout"] == 30

    @pytest.mark.asyncio
    async def test_default_filename(self):
        response = MagicMock(content=b"%PDF")
        with patch("formio_export.adapters.export.gotenberg.requests.post", return_value=response):
            document = await GotenbergAdapter("http://g").render_pdf({"source": "<p></p>"})

        assert document.filename == "export.pdf"

    @pytest.mark.asyncio
    async def test_request_failure_raises_renderer_error(self):
        adapter = GotenbergAdapter("http://gotenberg:3000")

        with patch(
            "formio_export.adapters.export.gotenberg.requests.post",
            side_effect=requests.ConnectionError("refused"),
        ):
            with pytest.raises(RendererError, match="refused"):
                await adapter.render_pdf({"source": "<p></p>"})

    @pytest.mark.asyncio
    async def test_missing_source_raises(self):
        with pytest.raises(RendererError):
            await GotenbergAdapter("http://g").render_pdf({"filename": "x.pdf"})

    @pytest.mark.asyncio
    async def test_health_check(self):
        adapter = GotenbergAdapter("http://gotenberg:3000")

        with patch(
            "formio_export.adapters.export.gotenberg.requests.get",
            return_value=MagicMock(status_code=200),
        ):
            assert await adapter.health_check() is True

        with patch(
            "formio_export.adapters.export.gotenberg.requests.get",
            side_effect=requests.ConnectionError(),
        ):
            assert await adapter.health_check() is False
