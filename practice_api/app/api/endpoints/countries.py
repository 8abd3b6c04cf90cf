"""
Country endpoints.

Same contract as the city endpoints: ``?id=`` lookups, filtered
listings and simulated writes that leave the dataset untouched.
"""

from typing import Optional, Tuple

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from practice_api.app.api.deps import page_params, parse_page, read_json_body, require_id
from practice_api.app.core.query import paginate, parse_int, parse_text
from practice_api.app.schemas.envelope import collection_response, message_response, record_response
from practice_api.app.services.country_service import CountryService, get_country_service

router = APIRouter()


@router.get("")
async def get_countries(
    record_id: Optional[str] = Query(None, alias="id"),
    continent: Optional[str] = Query(None, description="Case-insensitive substring of the continent"),
    language: Optional[str] = Query(None, description="Case-insensitive substring of a spoken language"),
    search: Optional[str] = Query(None, description="Case-insensitive substring of the country name"),
    min_population: Optional[str] = Query(None, alias="minPopulation"),
    max_population: Optional[str] = Query(None, alias="maxPopulation"),
    page: Tuple[Optional[str], Optional[str]] = Depends(page_params),
    service: CountryService = Depends(get_country_service),
) -> JSONResponse:
    """Look up one country by id or list the countries matching all filters."""
    country_id = parse_int("id", record_id)
    if country_id is not None:
        return record_response(service.get(country_id).to_wire())

    countries = service.query(
        continent=parse_text(continent),
        language=parse_text(language),
        search=parse_text(search),
        min_population=parse_int("minPopulation", min_population),
        max_population=parse_int("maxPopulation", max_population),
    )
    limit, offset = parse_page(page)
    return collection_response([country.to_wire() for country in paginate(countries, limit, offset)])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_country(
    request: Request,
    service: CountryService = Depends(get_country_service),
) -> JSONResponse:
    """Simulate creating a country.  Requires ``name``, ``code`` and ``capital``."""
    body = await read_json_body(request)
    country = service.create(body)
    return record_response(country.to_wire(), "Country created successfully", status.HTTP_201_CREATED)


@router.put("")
async def update_country(
    request: Request,
    record_id: Optional[str] = Query(None, alias="id"),
    service: CountryService = Depends(get_country_service),
) -> JSONResponse:
    country_id = require_id(record_id, "Country")
    body = await read_json_body(request)
    country = service.update(country_id, body)
    return record_response(country.to_wire(), "Country updated successfully")


@router.delete("")
async def delete_country(
    record_id: Optional[str] = Query(None, alias="id"),
    service: CountryService = Depends(get_country_service),
) -> JSONResponse:
    country = service.delete(require_id(record_id, "Country"))
    return message_response(f"Country '{country.name}' deleted successfully")
