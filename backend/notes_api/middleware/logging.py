"""
Notes API — Request Logging Middleware
========================================

What:  One access log line for every HTTP request and response.
Why:   Replaces uvicorn's access log with one that carries the request ID
       and the handling duration.
How:   Times the downstream call and logs method, path, status, duration,
       request ID and client IP with `extra` fields for structured handlers.
When:  After RequestIDMiddleware (uses request ID for correlation).

What we log vs what we DON'T log:
    ✅ Log: method, path, status, duration, IP, request ID
    ❌ Don't log: request body, Authorization header
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notes_api.middleware.request_id import request_id_var

logger = logging.getLogger("notes_api.access")

# Probed every few seconds by orchestrators; logging them drowns real traffic.
UNLOGGED_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of each request.

    Level by status: 5xx → ERROR, 4xx → WARNING, everything else → INFO.
    OPTIONS requests never reach a handler (CORSHeadersMiddleware answers
    them), so their lines are tagged "preflight" and carry `preflight=True`.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)

        fields = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": duration_ms,
            "client_ip": request.client.host if request.client else "unknown",
            "preflight": request.method == "OPTIONS",
        }
        logger.log(
            level_for_status(response.status_code),
            "%(method)s %(path)s %(status)d %(duration_ms).1fms%(tag)s [%(request_id)s] from %(client_ip)s",
            {**fields, "tag": " (preflight)" if fields["preflight"] else ""},
            extra=fields,
        )

        return response
