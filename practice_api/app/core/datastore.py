"""
Immutable snapshots of the practice datasets.

The raw literals in :mod:`practice_api.app.data` are validated into
frozen pydantic records the first time they are requested and cached
for the lifetime of the process.  Every loader returns a tuple, so a
snapshot cannot be mutated in place by a request handler; simulated
writes build new records instead.

Cities are the single source for the city summaries embedded in each
country and for the country name shown on each city.
"""

import logging
from functools import lru_cache
from typing import Dict, Tuple

from practice_api.app.data.cities import CITIES, CITY_FIELDS
from practice_api.app.data.countries import COUNTRIES
from practice_api.app.data.languages import LANGUAGES
from practice_api.app.schemas.city import City, CityBrief
from practice_api.app.schemas.country import Country
from practice_api.app.schemas.language import Language


logger = logging.getLogger(__name__)


def _country_names() -> Dict[int, str]:
    return {row["id"]: row["name"] for row in COUNTRIES}


@lru_cache(maxsize=None)
def load_cities() -> Tuple[City, ...]:
    names = _country_names()
    cities = []
    for row in CITIES:
        values = dict(zip(CITY_FIELDS, row))
        values["country"] = names.get(values["country_id"], "Unknown")
        cities.append(City(**values))
    logger.debug("Loaded %d cities", len(cities))
    return tuple(cities)


@lru_cache(maxsize=None)
def load_countries() -> Tuple[Country, ...]:
    by_country: Dict[int, list] = {}
    for city in load_cities():
        by_country.setdefault(city.country_id, []).append(
            CityBrief(id=city.id, name=city.name, population=city.population, is_capital=city.is_capital)
        )
    countries = tuple(Country(**row, cities=by_country.get(row["id"], [])) for row in COUNTRIES)
    logger.debug("Loaded %d countries", len(countries))
    return countries


@lru_cache(maxsize=None)
def load_languages() -> Tuple[Language, ...]:
    languages = tuple(Language(**row) for row in LANGUAGES)
    logger.debug("Loaded %d languages", len(languages))
    return languages
