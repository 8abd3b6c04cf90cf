"""
Shared behaviour for dataset-backed resource services.

A :class:`ResourceService` wraps one immutable snapshot of records and
implements lookup by id plus the simulated write operations.  Writes
validate the request body, compute the resulting record and return it;
the snapshot is never modified, so the next request sees the original
data again.  Subclasses declare their schemas and required fields and
add a ``query`` method with their own filter chain.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Generic, Sequence, Tuple, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from practice_api.app.core.errors import NotFoundError, ValidationError, describe_validation_error
from practice_api.app.core.query import FilterChain
from practice_api.app.schemas.common import CreatePayload, PartialUpdate, RecordModel


logger = logging.getLogger(__name__)

R = TypeVar("R", bound=RecordModel)


class ResourceService(Generic[R]):
    """Read access and simulated CRUD over a fixed tuple of records."""

    label: str = "Record"
    record_model: Type[RecordModel] = RecordModel
    create_model: Type[CreatePayload] = CreatePayload
    update_model: Type[PartialUpdate] = PartialUpdate
    # Attribute names; reported to clients in camelCase.
    required_fields: Tuple[str, ...] = ("name",)

    def __init__(self, records: Sequence[R]) -> None:
        self._records: Tuple[R, ...] = tuple(records)
        self._by_id: Dict[int, R] = {record.id: record for record in self._records}

    @property
    def records(self) -> Tuple[R, ...]:
        return self._records

    def chain(self) -> FilterChain[R]:
        return FilterChain(self.label.lower())

    def get(self, record_id: int) -> R:
        """Return the record with ``record_id`` or raise ``NotFoundError``."""
        record = self._by_id.get(record_id)
        if record is None:
            raise NotFoundError(f"{self.label} not found")
        return record

    def create(self, body: Any) -> R:
        """Validate ``body`` and build the record a create would produce.

        Required fields must be present and truthy.  ``null`` and empty
        string values are treated as omitted so that defaults apply.  The
        new id is ``len(dataset) + 1``; it is not guaranteed to be unique.
        """
        body = self._require_object(body)
        missing = [name for name in self.required_fields if not (body.get(to_camel(name)) or body.get(name))]
        if missing:
            wanted = ", ".join(to_camel(name) for name in self.required_fields)
            raise ValidationError(f"Missing required fields: {wanted}")
        provided = {key: value for key, value in body.items() if value is not None and value != ""}
        payload = self._validate(self.create_model, provided)
        record = self.build_record(len(self._records) + 1, payload)
        logger.info("Simulated create of %s %s (%s); dataset unchanged", self.label.lower(), record.id, record.name)
        return record

    def build_record(self, new_id: int, payload: CreatePayload) -> R:
        return self._validate(self.record_model, {"id": new_id, **payload.model_dump()})

    def update(self, record_id: int, body: Any) -> R:
        """Shallow-merge a typed partial update over an existing record.

        Unknown fields are rejected.  An ``id`` in the body, whatever its
        value, is dropped before validation; the stored id always wins.
        """
        body = self._require_object(body)
        record = self.get(record_id)
        fields = {key: value for key, value in body.items() if key != "id"}
        update = self._validate(self.update_model, fields)
        changes = update.changes()
        merged = self._validate(self.record_model, {**record.model_dump(), **changes, "id": record.id})
        logger.info(
            "Simulated update of %s %s (fields: %s); dataset unchanged",
            self.label.lower(),
            record.id,
            ", ".join(sorted(changes)) or "none",
        )
        return merged

    def delete(self, record_id: int) -> R:
        """Return the record a delete would remove.  Nothing is removed."""
        record = self.get(record_id)
        logger.info("Simulated delete of %s %s (%s); dataset unchanged", self.label.lower(), record.id, record.name)
        return record

    @staticmethod
    def _require_object(body: Any) -> Dict[str, Any]:
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")
        return body

    @staticmethod
    def _validate(model: Type[Any], data: Dict[str, Any]) -> Any:
        try:
            return model.model_validate(data)
        except PydanticValidationError as exc:
            raise ValidationError(describe_validation_error(exc)) from exc
