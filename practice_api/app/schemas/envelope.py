"""
Uniform response envelope.

Every response produced by the API, successful or not, has the shape::

    {"success": bool, "data": ..., "error": str, "count": int, "message": str}

Only the keys that were explicitly set are serialised, so a collection
response carries ``success``, ``count`` and ``data`` while a failure
carries ``success`` and ``error``.  The helpers below bind each outcome
class to its HTTP status code.
"""

from typing import Any, Dict, Optional

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class Envelope(BaseModel):
    success: bool
    data: Any = None
    error: Optional[str] = None
    count: Optional[int] = None
    message: Optional[str] = None


def _respond(envelope: Envelope, status_code: int, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", exclude_unset=True),
        headers=headers,
    )


def record_response(data: Any, message: Optional[str] = None, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Wrap a single record.  ``message`` is set for simulated writes."""
    if message is None:
        return _respond(Envelope(success=True, data=data), status_code)
    return _respond(Envelope(success=True, message=message, data=data), status_code)


def collection_response(data: list) -> JSONResponse:
    """Wrap a filtered collection; ``count`` always equals ``len(data)``."""
    return _respond(Envelope(success=True, count=len(data), data=data), status.HTTP_200_OK)


def message_response(message: str) -> JSONResponse:
    return _respond(Envelope(success=True, message=message), status.HTTP_200_OK)


def error_response(error: str, status_code: int, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return _respond(Envelope(success=False, error=error), status_code, headers)
