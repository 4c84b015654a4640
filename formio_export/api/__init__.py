"""
form.io Export API

FastAPI-based REST API for submission export.
"""

from .export_api import create_app, ExportAPI

__all__ = ["create_app", "ExportAPI"]
