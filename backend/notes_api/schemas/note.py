"""
Notes API — Pydantic Response Schemas
=======================================

What:  Pydantic models describing the JSON bodies the API returns.
Why:   Serialization and OpenAPI docs are generated from these.

There are no request schemas: the notes route deliberately never parses its
request body, so any payload is accepted.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class NotesPlaceholderResponse(BaseModel):
    """
    What:  Body returned by POST /notes.
    Why:   The notes feature has no storage yet; the route exists so the
           frontend can wire up its calls (and CORS preflights) today.
    """
    message: str = Field(
        default="Notes endpoint is not implemented yet",
        description="Human-readable placeholder message",
    )
    notes: List[dict] = Field(default_factory=list, description="Always empty")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for application errors.

    Fields:
        error: Machine-readable error code (e.g., "server_error")
        message: Human-readable description
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Liveness probe response. There are no dependencies to check."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    uptime_seconds: float = Field(description="Seconds since the app was created")
