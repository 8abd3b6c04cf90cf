"""
Request parsing helpers shared by the endpoint modules.
"""

import json
from typing import Any, Optional, Tuple

from fastapi import Query, Request

from practice_api.app.core.config import settings
from practice_api.app.core.errors import ValidationError
from practice_api.app.core.query import parse_int


async def read_json_body(request: Request) -> Any:
    """Decode the request body as JSON.

    Malformed or empty bodies raise ``ValidationError("Invalid JSON data")``
    rather than letting the decoder's exception escape.
    """
    raw = await request.body()
    try:
        return json.loads(raw)
    except ValueError:
        raise ValidationError("Invalid JSON data") from None


def page_params(
    limit: Optional[str] = Query(None, description="Maximum number of records to return"),
    offset: Optional[str] = Query(None, description="Number of matching records to skip"),
) -> Tuple[Optional[str], Optional[str]]:
    """Collect the raw ``limit``/``offset`` values.

    They are left unparsed so that an ``id`` lookup can ignore them;
    listings convert them with :func:`parse_page`.
    """
    return limit, offset


def parse_page(page: Tuple[Optional[str], Optional[str]]) -> Tuple[Optional[int], Optional[int]]:
    """Parse ``limit``/``offset``; both optional, both strictly integers."""
    limit, offset = page
    return (
        parse_int("limit", limit, minimum=1, maximum=settings.max_page_size),
        parse_int("offset", offset, minimum=0),
    )


def require_id(raw: Optional[str], label: str) -> int:
    """Parse the ``id`` query value of a write; absence is a 400."""
    record_id = parse_int("id", raw)
    if record_id is None:
        raise ValidationError(f"{label} ID is required")
    return record_id
