"""Application-wide error handlers.

Every error leaves the API as a JSON body of the form {"error": message}.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from guestbook.persistence.error import PersistenceError


def error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build a JSON error response."""
    return JSONResponse(
        status_code=status_code, content={"error": message}, headers=headers
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTPException (raised by routes or routing itself)."""
    return error_response(
        exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render a malformed or missing request body as 400."""
    logfire.warn(
        "Malformed request body",
        method=request.method,
        path=request.url.path,
        errors=str(exc.errors()),
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def persistence_error_handler(
    request: Request, exc: PersistenceError
) -> JSONResponse:
    """Render a storage failure as 500; the server keeps running."""
    logfire.error(
        "Storage failure",
        method=request.method,
        path=request.url.path,
        operation=exc.operation,
        error=str(exc),
        _exc_info=exc,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Storage is unavailable"
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any other exception as 500."""
    logfire.error(
        "Unhandled error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach all error handlers to the application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
