"""
Error taxonomy and exception handlers.

Services raise :class:`ValidationError` (bad input, HTTP 400) or
:class:`NotFoundError` (unknown id, HTTP 404).  ``register_exception_handlers``
installs handlers on the FastAPI application that turn these, as well
as framework errors and unexpected exceptions, into the uniform
response envelope so that no raw traceback ever reaches a client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from practice_api.app.schemas.envelope import error_response


logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ApiError(Exception):
    """Base class for errors that map onto an HTTP status code."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Missing or malformed input: required fields, bad JSON, bad query values."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    """No record matches the requested id."""

    status_code = status.HTTP_404_NOT_FOUND


def describe_validation_error(exc: PydanticValidationError) -> str:
    """Flatten a pydantic error into a single readable line.

    ``Invalid fields: population (Input should be a valid integer); foo (Extra inputs are not permitted)``
    """
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ())) or "body"
        parts.append(f"{location} ({err.get('msg')})")
    return "Invalid fields: " + "; ".join(parts)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.message, exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ()))
        parts.append(f"{location} ({err.get('msg')})")
    return error_response("Invalid request: " + "; ".join(parts), status.HTTP_400_BAD_REQUEST)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(str(exc.detail), exc.status_code, getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all envelope-producing exception handlers to ``app``."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
