"""
Notes API — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions.
Why:   Global handlers (registered in main.py) turn these into structured
       JSON error responses without try/except blocks in each route.
How:   Each exception carries a user-facing message and an optional context
       dict that is logged but never returned to the client.

Exception Hierarchy:
    NotesAPIError (base)      → 500 Internal Server Error
    └── ConfigurationError    → startup failure (process exits with status 1)

The routes themselves have no failure branches. Unknown paths and methods
are answered by the framework's default 404/405 responses, not by this
hierarchy.
"""

from typing import Any, Dict, Optional


class NotesAPIError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ConfigurationError(NotesAPIError):
    """
    Raised when settings cannot be loaded or fail validation.

    When:    NOTES_API_PORT is not an integer, NOTES_API_LOG_LEVEL is unknown, etc.
    Effect:  notes_api.server.main logs the message and exits with status 1.
    """

    def __init__(
        self,
        message: str = "Configuration validation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
