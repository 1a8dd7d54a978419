"""Error taxonomy and the handlers that render every failure as `{"error": message}`."""
import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong!"


class ValidationError(HTTPException):
    """Client data violates a field or business rule."""

    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


class NotFoundError(HTTPException):
    """A referenced entity does not exist."""

    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=message)


class MethodNotAllowedError(HTTPException):
    def __init__(self, method: str, path: str, headers=None):
        super().__init__(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            detail=f"{method} not allowed for {path}",
            headers=headers,
        )


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Routing raises bare starlette exceptions for unknown paths and methods
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and not isinstance(exc, MethodNotAllowedError):
        exc = MethodNotAllowedError(request.method, request.url.path, headers=exc.headers)
    elif exc.status_code == status.HTTP_404_NOT_FOUND and not isinstance(exc, NotFoundError):
        exc = NotFoundError(f"Path not found: {request.url.path}")

    logger.warning(
        "%s %s rejected with %d: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.detail,
    )
    return error_response(exc.status_code, exc.detail, headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed payloads as a 400 carrying the first pydantic error only."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.warning("%s %s rejected with 400: %s", request.method, request.url.path, message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
