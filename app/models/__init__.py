"""Pydantic models for the bodies the services produce themselves.

Business routes do not exist yet, so this is limited to the health probe
and the error envelope used by the global exception handler.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness probe response."""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: str


__all__ = ["ErrorResponse", "HealthResponse"]
