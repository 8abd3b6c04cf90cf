"""
Pydantic models for city data.

``City`` is a row of the static cities dataset.  ``CityCreate`` carries
the body of a simulated create, with defaults for the optional fields,
and ``CityUpdate`` the body of a simulated partial update.
"""

from typing import Optional

from pydantic import Field

from .common import CreatePayload, PartialUpdate, RecordModel


class CityBrief(RecordModel):
    """City summary embedded in a country record."""

    id: int
    name: str
    population: int
    is_capital: bool


class City(RecordModel):
    id: int
    name: str = Field(..., examples=["Tokyo"])
    population: int = Field(..., ge=0, examples=[13960000])
    is_capital: bool = False
    country_id: int = Field(..., examples=[3])
    country: str = Field(..., examples=["Japan"])


class CityCreate(CreatePayload):
    name: str
    country_id: int
    population: int = Field(0, ge=0)
    is_capital: bool = False
    country: str = "Unknown"


class CityUpdate(PartialUpdate):
    name: Optional[str] = None
    population: Optional[int] = Field(None, ge=0)
    is_capital: Optional[bool] = None
    country_id: Optional[int] = None
    country: Optional[str] = None
