"""
Notes API — Greeting Route
============================

What:  `/` answers every method with a fixed plain-text greeting.
Who:   Used as a smoke test by the frontend and by humans with curl.

Why a raw ASGI endpoint:
    FastAPI path operations need an explicit method list, and anything not
    on it gets a 405. A Starlette Route whose endpoint is a plain ASGI app
    and whose methods are left unset matches every method, including TRACE
    and non-standard verbs. OPTIONS still never gets here: the CORS
    middleware answers it first.
"""

from fastapi import APIRouter
from starlette.responses import PlainTextResponse
from starlette.types import Receive, Scope, Send

GREETING = "Hello, World!"


class GreetingEndpoint:
    """ASGI app that ignores the request and returns GREETING."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = PlainTextResponse(GREETING)
        await response(scope, receive, send)


router = APIRouter()
router.add_route("/", GreetingEndpoint(), name="hello", include_in_schema=False)
