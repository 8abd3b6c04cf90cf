"""
City endpoints.

``GET /cities`` either returns one city (``?id=``) or the cities that
match every supplied filter.  ``POST``, ``PUT`` and ``DELETE`` are
simulated: they validate the request and return what the write would
produce, but the dataset is never changed.
"""

from typing import Optional, Tuple

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from practice_api.app.api.deps import page_params, parse_page, read_json_body, require_id
from practice_api.app.core.query import paginate, parse_bool, parse_int, parse_text
from practice_api.app.schemas.envelope import collection_response, message_response, record_response
from practice_api.app.services.city_service import CityService, get_city_service

router = APIRouter()


@router.get("")
async def get_cities(
    record_id: Optional[str] = Query(None, alias="id", description="Return only the city with this id"),
    country_id: Optional[str] = Query(None, alias="countryId"),
    is_capital: Optional[str] = Query(None, alias="isCapital", description="true or false"),
    search: Optional[str] = Query(None, description="Case-insensitive substring of the city name"),
    min_population: Optional[str] = Query(None, alias="minPopulation"),
    max_population: Optional[str] = Query(None, alias="maxPopulation"),
    page: Tuple[Optional[str], Optional[str]] = Depends(page_params),
    service: CityService = Depends(get_city_service),
) -> JSONResponse:
    """Look up one city by id or list the cities matching all filters.

    An ``id`` short-circuits every other filter and yields 404 when no
    city has it.  Non-numeric ids, bounds or page values are a 400.
    """
    city_id = parse_int("id", record_id)
    if city_id is not None:
        return record_response(service.get(city_id).to_wire())

    cities = service.query(
        country_id=parse_int("countryId", country_id),
        is_capital=parse_bool("isCapital", is_capital),
        search=parse_text(search),
        min_population=parse_int("minPopulation", min_population),
        max_population=parse_int("maxPopulation", max_population),
    )
    limit, offset = parse_page(page)
    return collection_response([city.to_wire() for city in paginate(cities, limit, offset)])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_city(
    request: Request,
    service: CityService = Depends(get_city_service),
) -> JSONResponse:
    """Simulate creating a city.  Requires ``name`` and ``countryId``."""
    body = await read_json_body(request)
    city = service.create(body)
    return record_response(city.to_wire(), "City created successfully", status.HTTP_201_CREATED)


@router.put("")
async def update_city(
    request: Request,
    record_id: Optional[str] = Query(None, alias="id"),
    service: CityService = Depends(get_city_service),
) -> JSONResponse:
    """Simulate a partial update of the city given by ``?id=``."""
    city_id = require_id(record_id, "City")
    body = await read_json_body(request)
    city = service.update(city_id, body)
    return record_response(city.to_wire(), "City updated successfully")


@router.delete("")
async def delete_city(
    record_id: Optional[str] = Query(None, alias="id"),
    service: CityService = Depends(get_city_service),
) -> JSONResponse:
    """Simulate deleting the city given by ``?id=``."""
    city = service.delete(require_id(record_id, "City"))
    return message_response(f"City '{city.name}' deleted successfully")
