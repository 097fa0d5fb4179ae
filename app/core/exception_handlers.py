"""Exception handlers.

Every failure leaves the API as ``{"type": ..., "message": ...}``, whether it
was raised by a domain service, by routing, by request validation or by
something nobody anticipated.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import AppException

logger = logging.getLogger("app.exception")

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def error_response(status_code: int, error_type: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"type": error_type, "message": message},
    )


def _log_level(status_code: int) -> int:
    # Denied credentials and permissions are worth a look; bad input is not.
    if status_code >= 500:
        return logging.ERROR
    if status_code in (401, 403):
        return logging.WARNING
    return logging.INFO


def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    logger.log(
        _log_level(exc.status_code),
        "%s %s failed: %s - %s",
        request.method,
        request.url.path,
        exc.error_type,
        exc.message,
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": exc.status_code,
            "error_type": exc.error_type,
        },
    )
    return error_response(exc.status_code, exc.error_type, exc.message)


def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown paths and wrong methods."""
    return error_response(exc.status_code, "http_error", str(exc.detail))


def _describe(error: dict) -> str:
    location = [str(part) for part in error["loc"] if part not in ("body", "query")]
    if not location:
        return error["msg"]
    return f"{'.'.join(location)}: {error['msg']}"


def validation_exception_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies and query strings, all problems in one message."""
    message = "; ".join(_describe(error) for error in exc.errors())
    return error_response(422, "validation_error", message)


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Storage failures and bugs. Details stay in the log."""
    logger.exception(
        "Unhandled %s on %s %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        extra={"method": request.method, "path": request.url.path, "status_code": 500},
    )
    return error_response(500, "internal_error", INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
