"""
Notes API — Notes Route Handler
=================================

What:  POST /notes, a placeholder for the future notes feature.
How:   Returns a fixed JSON body. The request body is never read, so invalid
       JSON, an empty body or any content type all get the same 200.

Only POST is registered. GET/PUT/DELETE on /notes fall through to the
framework's 405 Method Not Allowed; OPTIONS is answered by the CORS
middleware.
"""

import logging

from fastapi import APIRouter, Request

from notes_api.schemas.note import ErrorResponse, NotesPlaceholderResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])


@router.post(
    "/notes",
    response_model=NotesPlaceholderResponse,
    responses={
        200: {"description": "Placeholder body", "model": NotesPlaceholderResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Notes placeholder",
)
async def get_notes(request: Request) -> NotesPlaceholderResponse:
    logger.debug("Notes placeholder hit [%s]", getattr(request.state, "request_id", ""))
    return NotesPlaceholderResponse()
