"""
Language endpoints.
"""

from typing import Optional, Tuple

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from practice_api.app.api.deps import page_params, parse_page, read_json_body, require_id
from practice_api.app.core.query import paginate, parse_int, parse_text
from practice_api.app.schemas.envelope import collection_response, message_response, record_response
from practice_api.app.services.language_service import LanguageService, get_language_service

router = APIRouter()


@router.get("")
async def get_languages(
    record_id: Optional[str] = Query(None, alias="id"),
    country_id: Optional[str] = Query(None, alias="countryId", description="Languages spoken in this country"),
    search: Optional[str] = Query(None, description="Substring of the English or native name"),
    min_speakers: Optional[str] = Query(None, alias="minSpeakers"),
    max_speakers: Optional[str] = Query(None, alias="maxSpeakers"),
    page: Tuple[Optional[str], Optional[str]] = Depends(page_params),
    service: LanguageService = Depends(get_language_service),
) -> JSONResponse:
    language_id = parse_int("id", record_id)
    if language_id is not None:
        return record_response(service.get(language_id).to_wire())

    languages = service.query(
        country_id=parse_int("countryId", country_id),
        search=parse_text(search),
        min_speakers=parse_int("minSpeakers", min_speakers),
        max_speakers=parse_int("maxSpeakers", max_speakers),
    )
    limit, offset = parse_page(page)
    return collection_response([language.to_wire() for language in paginate(languages, limit, offset)])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_language(
    request: Request,
    service: LanguageService = Depends(get_language_service),
) -> JSONResponse:
    """Simulate creating a language.  ``nativeName`` defaults to ``name``."""
    body = await read_json_body(request)
    language = service.create(body)
    return record_response(language.to_wire(), "Language created successfully", status.HTTP_201_CREATED)


@router.put("")
async def update_language(
    request: Request,
    record_id: Optional[str] = Query(None, alias="id"),
    service: LanguageService = Depends(get_language_service),
) -> JSONResponse:
    language_id = require_id(record_id, "Language")
    body = await read_json_body(request)
    language = service.update(language_id, body)
    return record_response(language.to_wire(), "Language updated successfully")


@router.delete("")
async def delete_language(
    record_id: Optional[str] = Query(None, alias="id"),
    service: LanguageService = Depends(get_language_service),
) -> JSONResponse:
    language = service.delete(require_id(record_id, "Language"))
    return message_response(f"Language '{language.name}' deleted successfully")
