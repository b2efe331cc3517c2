"""
Standardized API response models.
Documents the envelopes produced by the error handlers in api.middleware.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid argument"},
    404: {"model": ErrorResponse, "description": "Not found"},
    422: {"model": ErrorResponse, "description": "Validation or decode failure"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
}
