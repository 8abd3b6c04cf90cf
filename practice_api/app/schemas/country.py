"""
Pydantic models for country data.

A country embeds the names of the languages spoken there and a summary
of its cities.
"""

from typing import List, Optional, Tuple

from pydantic import Field

from .city import CityBrief
from .common import CreatePayload, PartialUpdate, RecordModel


class Country(RecordModel):
    id: int
    name: str = Field(..., examples=["Japan"])
    code: str = Field(..., examples=["JP"])
    capital: str = Field(..., examples=["Tokyo"])
    continent: str = Field(..., examples=["Asia"])
    population: int = Field(..., ge=0)
    languages: Tuple[str, ...] = ()
    cities: Tuple[CityBrief, ...] = ()


class CountryCreate(CreatePayload):
    name: str
    code: str
    capital: str
    continent: str = "Unknown"
    population: int = Field(0, ge=0)
    languages: List[str] = []
    cities: List[CityBrief] = []


class CountryUpdate(PartialUpdate):
    name: Optional[str] = None
    code: Optional[str] = None
    capital: Optional[str] = None
    continent: Optional[str] = None
    population: Optional[int] = Field(None, ge=0)
    languages: Optional[List[str]] = None
    cities: Optional[List[CityBrief]] = None
