"""
Notes API — CORS Middleware
=============================

What:  Blanket cross-origin policy for every route.
Why:   The browser frontend is served from a different origin than the API.
How:   Sets three fixed Access-Control-* headers on every response and
       answers OPTIONS preflights itself with an empty 200.

Contract:
    - Headers are set unconditionally, overwriting whatever the handler set.
    - OPTIONS never reaches the router: no handler runs, no 405 for paths
      that only register POST.
    - No origin allow-listing, no credentials, no per-route override.

Why not Starlette's CORSMiddleware:
    It echoes/validates the request Origin and only treats OPTIONS with an
    Access-Control-Request-Method header as a preflight. This service wants
    a static header set and a short-circuit for every OPTIONS request.
"""

from typing import Mapping, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

DEFAULT_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Applies a static CORS header set and short-circuits preflight requests.

    Args:
        app:      The downstream ASGI application (the router).
        headers:  Header name → value mapping. Defaults to DEFAULT_CORS_HEADERS.
    """

    def __init__(self, app: ASGIApp, headers: Optional[Mapping[str, str]] = None):
        super().__init__(app)
        self.cors_headers = dict(headers if headers is not None else DEFAULT_CORS_HEADERS)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=self.cors_headers)

        response = await call_next(request)
        for name, value in self.cors_headers.items():
            response.headers[name] = value
        return response
