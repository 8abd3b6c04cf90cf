"""
Business logic for countries.

Filters are applied in a fixed order: continent, spoken language, name
search, minimum population, maximum population.  Continent and language
match on case-insensitive substrings, so ``continent=europe`` also
matches ``Europe/Asia``.
"""

from functools import lru_cache
from typing import List, Optional

from practice_api.app.core.datastore import load_countries
from practice_api.app.core.query import contains
from practice_api.app.schemas.country import Country, CountryCreate, CountryUpdate

from .base import ResourceService


class CountryService(ResourceService[Country]):
    label = "Country"
    record_model = Country
    create_model = CountryCreate
    update_model = CountryUpdate
    required_fields = ("name", "code", "capital")

    def query(
        self,
        continent: Optional[str] = None,
        language: Optional[str] = None,
        search: Optional[str] = None,
        min_population: Optional[int] = None,
        max_population: Optional[int] = None,
    ) -> List[Country]:
        chain = self.chain()
        if continent:
            chain.where("continent", lambda c: contains(c.continent, continent))
        if language:
            chain.where("language", lambda c: any(contains(name, language) for name in c.languages))
        if search:
            chain.where("search", lambda c: contains(c.name, search))
        if min_population is not None:
            chain.where("minPopulation", lambda c: c.population >= min_population)
        if max_population is not None:
            chain.where("maxPopulation", lambda c: c.population <= max_population)
        return chain.apply(self.records)


@lru_cache(maxsize=None)
def get_country_service() -> CountryService:
    return CountryService(load_countries())
