"""Map exceptions onto the error envelope.

    InputError              -> 400, error message from the exception
    RequestValidationError  -> 400, first offending field
    HTTPException           -> its own status (404, 405, ...)
    InstructionBuildError   -> 500, generic message
    anything else           -> 500, generic message

Only the first validation problem is reported; errors are never
aggregated.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from solforge.errors import InputError, SolforgeError
from solforge.web.contracts import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(
    status_code: int, message: str, headers: Optional[dict[str, str]] = None
) -> JSONResponse:
    """Build an error envelope response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


def describe_validation_error(exc: RequestValidationError) -> str:
    """Turn the first request validation error into a one-line message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"

    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if not field:
        if first.get("type") == "missing":
            return "Missing request body"
        return f"Invalid request body: {first.get('msg')}"

    if first.get("type") == "missing":
        return f"Missing field: {field}"
    return f"Invalid {field}: {first.get('msg')}"


async def handle_input_error(request: Request, exc: InputError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_validation_error(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def handle_internal_error(request: Request, exc: SolforgeError) -> JSONResponse:
    logger.error("Internal error on %s %s: %s", request.method, request.url.path, exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope exception handlers on ``app``."""
    app.add_exception_handler(InputError, handle_input_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(SolforgeError, handle_internal_error)

    @app.middleware("http")
    async def catch_unexpected_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
            )
