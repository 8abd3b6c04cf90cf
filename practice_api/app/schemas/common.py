"""
Shared base classes for resource schemas.

``RecordModel`` is the frozen, read-only representation of a dataset
row.  ``CreatePayload`` accepts and ignores unknown keys, while
``PartialUpdate`` rejects them so that an update can only ever touch
fields the resource actually has.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_wire(self) -> dict:
        """Return a JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class CreatePayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class PartialUpdate(BaseModel):
    """Base for typed partial updates.

    Every field is optional.  There is no ``id`` field: the service
    strips it from the body first, so the stored id can never change.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    def changes(self) -> dict:
        """Fields the client actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)
