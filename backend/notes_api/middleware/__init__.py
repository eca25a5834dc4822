# Middleware package init
"""
Notes API — Middleware Package
================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Why this order:
    1. Request ID first: every later log line can carry the correlation ID
    2. Logging: records status and duration, including answered preflights
    3. CORS last: sits directly in front of the router, sets the headers on
       every response and answers OPTIONS without reaching a handler

    Starlette runs middleware in REVERSE order of add_middleware() calls, so
    create_app() adds them as CORS → Logging → Request ID.
"""
