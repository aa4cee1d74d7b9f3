"""
Exception handlers

Every error leaving the API has the same envelope:

    {
        "error": {
            "status_code": 404,
            "error_code": "RESOURCE_POST_NOT_FOUND",
            "message": "Post with id '123' not found",
            "type": "Not Found",
            "details": {"resource_type": "Post", "resource_id": 123},
            "path": "/api/posts/id/123"
        }
    }

``details`` is omitted when empty. Unexpected exceptions never leak their
message; they are logged with a traceback and reported as a generic 500.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog.exceptions import BlogError, ErrorCode

logger = logging.getLogger(__name__)

ERROR_TYPES = {
    status.HTTP_400_BAD_REQUEST: "Bad Request",
    status.HTTP_401_UNAUTHORIZED: "Unauthorized",
    status.HTTP_403_FORBIDDEN: "Forbidden",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method Not Allowed",
    status.HTTP_422_UNPROCESSABLE_ENTITY: "Validation Error",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
}

# Codes for errors raised by the framework rather than the service layer
HTTP_ERROR_CODES = {
    status.HTTP_401_UNAUTHORIZED: ErrorCode.AUTH_INVALID_TOKEN,
    status.HTTP_404_NOT_FOUND: ErrorCode.RESOURCE_NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorCode.VALIDATION_FAILED,
    status.HTTP_422_UNPROCESSABLE_ENTITY: ErrorCode.VALIDATION_FAILED,
    status.HTTP_500_INTERNAL_SERVER_ERROR: ErrorCode.INTERNAL_ERROR,
}


def get_error_type(status_code: int) -> str:
    return ERROR_TYPES.get(status_code, "Error")


def error_response(
    request: Request,
    status_code: int,
    message: str,
    error_code: ErrorCode,
    details: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the JSON error envelope for ``request``."""
    body: dict[str, Any] = {
        "status_code": status_code,
        "error_code": error_code.value,
        "message": message,
        "type": get_error_type(status_code),
        "path": request.url.path,
    }
    if details:
        body["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content={"error": body}, headers=headers)


async def handle_blog_error(request: Request, exc: BlogError) -> JSONResponse:
    # Not-found and conflict outcomes are expected; only 5xx is an error
    level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
    logger.log(
        level,
        "%s on %s: %s",
        type(exc).__name__,
        request.url.path,
        exc.message,
        extra={"status_code": exc.status_code, "error_code": exc.error_code.value, "path": request.url.path},
    )

    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return error_response(request, exc.status_code, exc.message, exc.error_code, exc.details, headers)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown routes, wrong methods and bearer token failures."""
    logger.warning(
        "HTTP %d on %s: %s",
        exc.status_code,
        request.url.path,
        exc.detail,
        extra={"status_code": exc.status_code, "path": request.url.path},
    )
    error_code = HTTP_ERROR_CODES.get(exc.status_code, ErrorCode.UNKNOWN_ERROR)
    return error_response(
        request,
        exc.status_code,
        str(exc.detail),
        error_code,
        headers=getattr(exc, "headers", None),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report each invalid field as ``{"field", "message", "type"}``.

    The ``body`` prefix is dropped from field paths so that body fields read
    as ``title`` or ``seo_data.event_start_date``; path and query
    parameters keep their location prefix.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.warning("Validation failed on %s: %d error(s)", request.url.path, len(errors))

    return error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Validation error",
        ErrorCode.VALIDATION_FAILED,
        details={"validation_errors": errors},
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled %s on %s %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path},
    )
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please try again later.",
        ErrorCode.INTERNAL_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BlogError, handle_blog_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
