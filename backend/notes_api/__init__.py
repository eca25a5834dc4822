"""
Notes API — Application Package Initializer
=============================================

What: Marks the `notes_api` directory as a Python package.
Why:  Enables imports like `from notes_api.config import Settings`.
Who:  Used by uvicorn (through notes_api.server), pytest, and the console script.

Architecture Note:
    The service is deliberately thin:

    ┌─────────────────────────────────────┐
    │        Middleware (cross-cutting)   │  ← request ID, access log, CORS
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← greeting, notes, health
    ├─────────────────────────────────────┤
    │       Schemas (response shapes)     │  ← Pydantic models
    └─────────────────────────────────────┘

    There is no service or persistence layer. Notes are a placeholder route.
"""

__version__ = "1.0.0"
