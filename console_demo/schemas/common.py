"""
Console Demo API - Shared Response Schemas
===========================================

What:  Error and health response models shared by every route.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SaveEnvelope(BaseModel):
    """
    Status record built by the save operations.

    Only ever written to the log; the HTTP response carries the echoed
    body or a fixed confirmation string instead.
    """
    message: str
    status: int = 200


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for JSON API errors.

    Example:
        {
            "error": "unauthorized",
            "message": "Missing or invalid API key",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for liveness probes."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    employee_count: int = Field(description="Records currently held by the registry")
    uptime_seconds: float = Field(description="Seconds since service started")
