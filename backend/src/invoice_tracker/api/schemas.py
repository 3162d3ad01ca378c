"""
Pydantic schemas for API responses.

These schemas define the contract between frontend and backend.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str


class IntegrationFlagsResponse(BaseModel):
    """Loki Mode integration flags as configured."""
    jurisdiction: bool
    checkpoints: bool
    verification: bool


class LokiConfigResponse(BaseModel):
    integrations: IntegrationFlagsResponse


class PageLinkResponse(BaseModel):
    """A navigation entry of the page shell."""
    name: str
    path: str


class PocConfigResponse(BaseModel):
    """Public POC configuration."""
    app_title: str
    version: str
    loki: LokiConfigResponse
    pages: list[PageLinkResponse]


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: str | None = None
