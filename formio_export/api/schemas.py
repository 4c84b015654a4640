"""
API Pydantic models for the export service.

Request/response models used by the export endpoints.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class ExportRequest(BaseModel):
    """Request model for one-shot exports"""

    component: Optional[Dict[str, Any]] = Field(
        None, description="form.io component or form definition"
    )
    data: Optional[Union[List[Dict[str, Any]], Dict[str, Any]]] = Field(
        None, description="Submission, submission list or raw data"
    )
    formio: Optional[Dict[str, Any]] = Field(
        None, description="Render options applied to every submission"
    )
    config: Optional[Dict[str, Any]] = Field(
        None, description="Renderer configuration (filename, margins, sheets)"
    )

    def to_options(self) -> Dict[str, Any]:
        """Options mapping for the export entry points, omitting unset fields."""
        return {key: value for key, value in self.model_dump().items() if value is not None}


class HealthResponse(BaseModel):
    """Health check response"""

    status: str
    timestamp: datetime
    version: str
    uptime: float
    pdf_backend_available: bool = False


class ErrorResponse(BaseModel):
    """Error response model"""

    error: str
    message: str
    details: Optional[Dict[str, Any]] = None
    timestamp: datetime
