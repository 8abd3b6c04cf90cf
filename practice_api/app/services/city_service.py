"""
Business logic for cities.

Filters are applied in a fixed order: country, capital flag, name
search, minimum population, maximum population.
"""

from functools import lru_cache
from typing import List, Optional

from practice_api.app.core.datastore import load_cities
from practice_api.app.core.query import contains
from practice_api.app.schemas.city import City, CityCreate, CityUpdate

from .base import ResourceService


class CityService(ResourceService[City]):
    label = "City"
    record_model = City
    create_model = CityCreate
    update_model = CityUpdate
    required_fields = ("name", "country_id")

    def query(
        self,
        country_id: Optional[int] = None,
        is_capital: Optional[bool] = None,
        search: Optional[str] = None,
        min_population: Optional[int] = None,
        max_population: Optional[int] = None,
    ) -> List[City]:
        chain = self.chain()
        if country_id is not None:
            chain.where("countryId", lambda c: c.country_id == country_id)
        if is_capital is not None:
            chain.where("isCapital", lambda c: c.is_capital == is_capital)
        if search:
            chain.where("search", lambda c: contains(c.name, search))
        if min_population is not None:
            chain.where("minPopulation", lambda c: c.population >= min_population)
        if max_population is not None:
            chain.where("maxPopulation", lambda c: c.population <= max_population)
        return chain.apply(self.records)


@lru_cache(maxsize=None)
def get_city_service() -> CityService:
    """FastAPI dependency returning the service bound to the static dataset."""
    return CityService(load_cities())
