"""
Application errors and their HTTP translations.

``ParticipantNotFound`` is raised by the record store and turned into
a 404 response by ``participant_not_found_handler``.  Anything else
that escapes a handler is turned into a generic 500 response by
``catch_unhandled_errors``; the traceback goes to the log only.
"""

import logging
from typing import Awaitable, Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Participant not found"
INTERNAL_ERROR_MESSAGE = "Something went wrong!"


class ParticipantNotFound(Exception):
    """Raised when no participant matches the requested identifier."""

    def __init__(self, participant_id: object) -> None:
        super().__init__(f"Participant {participant_id!r} not found")
        self.participant_id = participant_id


async def participant_not_found_handler(request: Request, exc: ParticipantNotFound) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": NOT_FOUND_MESSAGE},
    )


async def catch_unhandled_errors(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """HTTP middleware converting unexpected exceptions into a 500.

    HTTP errors and validation errors are already handled by FastAPI
    before they reach this point; only genuine faults end up here.
    """
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error while processing %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
