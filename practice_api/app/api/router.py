"""
Top-level router for the practice resources.

When a new dataset is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import cities, countries, languages

router = APIRouter()

router.include_router(cities.router, prefix="/cities", tags=["cities"])
router.include_router(countries.router, prefix="/countries", tags=["countries"])
router.include_router(languages.router, prefix="/languages", tags=["languages"])
