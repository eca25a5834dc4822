"""
Notes API — FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
Why:   Composition root: router, middleware chain, exception handlers and
       routes are all assembled here and nowhere else.
How:   create_app(settings) returns a configured FastAPI instance.
Who:   Called by notes_api.server.main, which hands the app to uvicorn, and
       by the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │  Request ID  │→│ Logging  │→│ CORS (+OPTIONS) │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌────────────┐ ┌──────────────┐   │
    │  │ ANY /        │ │ POST notes │ │ GET /health  │   │
    │  └──────────────┘ └────────────┘ └──────────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotesAPIError→500 │ Exception→500            │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

There is no module-level `app`. To run under the uvicorn CLI use the factory
flag: `uvicorn --factory notes_api.main:create_app`.
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from notes_api import __version__
from notes_api.config import Settings, load_settings
from notes_api.exceptions import NotesAPIError
from notes_api.middleware.cors import DEFAULT_CORS_HEADERS, CORSHeadersMiddleware
from notes_api.middleware.logging import RequestLoggingMiddleware
from notes_api.middleware.request_id import RequestIDMiddleware, request_id_var
from notes_api.routes import greeting, health, notes

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (Docker captures it).

    uvicorn's own access log is turned down because RequestLoggingMiddleware
    already logs every request, with the request ID attached.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Log startup and shutdown.

    There are no resources to open or close. Logging is configured here as
    well as in the server entry point so that `uvicorn --factory` gets the
    same log format.
    """
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)
    logger.info("Notes API %s starting up...", __version__)
    logger.info("Listening on http://%s:%d", settings.host, settings.port)

    yield

    logger.info("Notes API shutting down...")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to JSON error responses.

    Handler hierarchy:
        NotesAPIError (base)    → 500 server_error
        Exception (fallback)    → 500 internal_server_error

    404 and 405 are left to the framework defaults.
    Exception context and stack traces are logged, never returned.
    """

    @app.exception_handler(NotesAPIError)
    async def handle_notes_api_error(request: Request, exc: NotesAPIError):
        rid = request_id_var.get("")
        logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Runs in ServerErrorMiddleware, outside the request ID context; the
        # ID is still on the shared scope state.
        rid = request_id_var.get("") or getattr(request.state, "request_id", "")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to build the app with. Read from the
                  environment via load_settings() when omitted, so a bad
                  environment raises ConfigurationError.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="Notes API",
        description="Greeting and notes endpoints behind a blanket CORS policy.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.started_at = time.time()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute, so the order below yields:
    # RequestID → Logging → CORS → router
    app.add_middleware(CORSHeadersMiddleware, headers=DEFAULT_CORS_HEADERS)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(greeting.router)
    app.include_router(notes.router)
    app.include_router(health.router)

    return app
