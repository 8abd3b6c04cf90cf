"""Pydantic models for language data."""

from typing import List, Optional, Tuple

from pydantic import Field

from .common import CreatePayload, PartialUpdate, RecordModel


class Language(RecordModel):
    id: int
    name: str = Field(..., examples=["Japanese"])
    native_name: str = Field(..., examples=["日本語"])
    iso6391: str = Field(..., examples=["ja"])
    speakers: int = Field(..., ge=0)
    countries: Tuple[str, ...] = ()
    country_ids: Tuple[int, ...] = ()


class LanguageCreate(CreatePayload):
    name: str
    iso6391: str
    # Defaults to ``name`` when omitted; filled in by the service.
    native_name: Optional[str] = None
    speakers: int = Field(0, ge=0)
    countries: List[str] = []
    country_ids: List[int] = []


class LanguageUpdate(PartialUpdate):
    name: Optional[str] = None
    native_name: Optional[str] = None
    iso6391: Optional[str] = None
    speakers: Optional[int] = Field(None, ge=0)
    countries: Optional[List[str]] = None
    country_ids: Optional[List[int]] = None
