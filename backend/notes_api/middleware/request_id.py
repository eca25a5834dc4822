"""
Notes API — Request ID Middleware
===================================

What:  Assigns a short correlation ID to each incoming request and returns it
       in the X-Request-ID response header.
Why:   Lets a single request be traced through access logs and error bodies.
How:   Reuses the client's X-Request-ID if sent, otherwise generates one;
       stores it in a ContextVar and on request.state.
When:  Outermost application middleware (runs before logging and CORS).
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on the same event loop each see their own ID.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Check if client sent X-Request-ID header
        2. If present: use it (end-to-end tracing from the frontend)
        3. If absent: generate the first 8 characters of a UUID4
        4. Store in ContextVar for loggers and exception handlers
        5. Add to response headers for the client to capture
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid

        return response
