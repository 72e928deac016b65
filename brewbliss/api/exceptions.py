"""FastAPI exception handlers for reservation domain errors.

Status mapping:
- 400 Bad Request: validation failures, slot conflicts, malformed identifiers
- 404 Not Found: identifier does not resolve to a reservation
- 500 Internal Server Error: storage failures and anything unexpected

Usage:
    from brewbliss.api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from brewbliss.errors import (
    InvalidReservationIdError,
    ReservationError,
    ReservationNotFoundError,
    ReservationStorageError,
    ReservationValidationError,
    SlotUnavailableError,
)
from brewbliss.services.validation import field_errors

logger = structlog.get_logger()


def _validation_response(exc: ReservationValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "message": exc.message,
            "errors": [error.to_dict() for error in exc.errors],
        },
    )


async def reservation_error_handler(request: Request, exc: ReservationError) -> JSONResponse:
    """Convert a ReservationError into its JSON response."""
    if isinstance(exc, ReservationValidationError):
        return _validation_response(exc)

    if isinstance(exc, SlotUnavailableError):
        return JSONResponse(
            status_code=HTTP_400_BAD_REQUEST,
            content={"message": exc.message, "error": exc.reason},
        )

    if isinstance(exc, ReservationNotFoundError):
        return JSONResponse(status_code=HTTP_404_NOT_FOUND, content={"message": exc.message})

    if isinstance(exc, InvalidReservationIdError):
        return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"message": exc.message})

    if isinstance(exc, ReservationStorageError):
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": exc.message, "error": exc.detail},
        )

    return JSONResponse(status_code=HTTP_500_INTERNAL_SERVER_ERROR, content={"message": exc.message})


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback for failures no other handler claims."""
    logger.exception(
        "Unhandled exception",
        method=request.method,
        path=request.url.path,
        error=str(exc),
    )
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error", "error": str(exc)},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed query/path parameters with the same body as field errors."""
    return _validation_response(ReservationValidationError(field_errors(exc.errors())))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ReservationError, reservation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
