"""
Notes API — Health Check Route
================================

What:  Liveness endpoint for Docker health checks and load balancer probes.
Why:   The service has no database or upstream API, so "the process answers
       HTTP" is the whole health story.
"""

import time

from fastapi import APIRouter, Request

from notes_api import __version__
from notes_api.schemas.note import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    """
    Report liveness, version and uptime.

    Uptime is measured from `app.state.started_at`, set by create_app().
    """
    started_at = getattr(request.app.state, "started_at", time.time())
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=round(time.time() - started_at, 2),
    )
