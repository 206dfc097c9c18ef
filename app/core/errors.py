# File: app/core/errors.py

"""
Error type raised by routes and services, and the handlers that turn every
failure into the same JSON envelope:

    {"status": "failed" | "error", "message": "..."}

"error" is used for 500s and unmatched routes, "failed" for everything else.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

NO_SUCH_ROUTE = "no such route"
SERVER_ERROR = "server error"


class AppError(Exception):
    """An error that already knows its HTTP status and client-facing message."""

    def __init__(self, status_code: int, message: str, errors: Optional[list[Any]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = errors


def error_envelope(
    status_code: int,
    message: Optional[str],
    errors: Optional[list[Any]] = None,
) -> JSONResponse:
    body: dict[str, Any] = {
        "status": "error" if status_code >= 500 else "failed",
        "message": message or SERVER_ERROR,
    }
    if errors:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content=body)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_envelope(exc.status_code, exc.message, exc.errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        # Raised by the router when no route matches the path and method.
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"status": "error", "message": NO_SUCH_ROUTE},
        )
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    response = error_envelope(exc.status_code, str(exc.detail) if exc.detail else None)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append({"field": ".".join(loc), "message": err.get("msg", "")})
    message = "; ".join(
        f"{e['field']}: {e['message']}" if e["field"] else e["message"] for e in errors
    )
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, message)
    return error_envelope(status.HTTP_400_BAD_REQUEST, message or "invalid request body", errors)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
