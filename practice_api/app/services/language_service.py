"""
Business logic for languages.

Filters: country membership, search over the English and native name,
then the speaker-count range.
"""

from functools import lru_cache
from typing import List, Optional

from practice_api.app.core.datastore import load_languages
from practice_api.app.core.query import contains
from practice_api.app.schemas.language import Language, LanguageCreate, LanguageUpdate

from .base import ResourceService


class LanguageService(ResourceService[Language]):
    label = "Language"
    record_model = Language
    create_model = LanguageCreate
    update_model = LanguageUpdate
    required_fields = ("name", "iso6391")

    def query(
        self,
        country_id: Optional[int] = None,
        search: Optional[str] = None,
        min_speakers: Optional[int] = None,
        max_speakers: Optional[int] = None,
    ) -> List[Language]:
        chain = self.chain()
        if country_id is not None:
            chain.where("countryId", lambda lang: country_id in lang.country_ids)
        if search:
            chain.where("search", lambda lang: contains(lang.name, search) or contains(lang.native_name, search))
        if min_speakers is not None:
            chain.where("minSpeakers", lambda lang: lang.speakers >= min_speakers)
        if max_speakers is not None:
            chain.where("maxSpeakers", lambda lang: lang.speakers <= max_speakers)
        return chain.apply(self.records)

    def build_record(self, new_id: int, payload: LanguageCreate) -> Language:
        values = payload.model_dump()
        values["native_name"] = values.get("native_name") or payload.name
        return self._validate(Language, {"id": new_id, **values})


@lru_cache(maxsize=None)
def get_language_service() -> LanguageService:
    return LanguageService(load_languages())
