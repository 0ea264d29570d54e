"""
CRUD Service

Generic create/list/get/update/delete over one model. Resources owned by a
user are always filtered by the owner column, so a row belonging to someone
else looks exactly like a missing row.
"""

import logging
from typing import Any, Dict, List, Optional, Type
from uuid import UUID

from marshmallow import Schema, ValidationError

from zakfit.extensions import db
from zakfit.utils.errors import BadRequest, NotFound
from zakfit.utils.http import parse_uuid

logger = logging.getLogger(__name__)


def load_payload(schema: Schema, data: Any, partial: bool = False) -> Dict[str, Any]:
    """
    Validate a request body.

    With ``partial=True`` only the keys present in ``data`` come back, which is
    what makes updates a merge-patch: an absent key is never confused with a
    key explicitly set to null.
    """
    try:
        return schema.load(data, partial=partial)
    except ValidationError as exc:
        raise BadRequest("Invalid request body", code="VALIDATION_ERROR", fields=exc.messages) from exc


class CrudResource:
    def __init__(
        self,
        model: Type[db.Model],
        schema: Schema,
        label: str,
        owner_field: Optional[str] = None,
        references: Optional[Dict[str, Type[db.Model]]] = None,
    ):
        self.model = model
        self.schema = schema
        self.label = label
        self.owner_field = owner_field
        self.references = references or {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _query(self, owner_id: Optional[UUID] = None):
        query = self.model.query
        if self.owner_field:
            query = query.filter(getattr(self.model, self.owner_field) == owner_id)
        return query

    def parse_id(self, raw_id: Any) -> UUID:
        record_id = parse_uuid(raw_id)
        if record_id is None:
            raise BadRequest(f"Invalid {self.label.lower()} id")
        return record_id

    def list(self, owner_id: Optional[UUID] = None) -> List[Any]:
        return (
            self._query(owner_id)
            .order_by(self.model.created_at, self.model.id)
            .all()
        )

    def get(self, raw_id: Any, owner_id: Optional[UUID] = None):
        record_id = self.parse_id(raw_id)
        record = self._query(owner_id).filter(self.model.id == record_id).first()
        if not record:
            raise NotFound(f"{self.label} not found")
        return record

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _check_references(self, data: Dict[str, Any]):
        for field, ref_model in self.references.items():
            if field in data and db.session.get(ref_model, data[field]) is None:
                raise BadRequest(f"Unknown {field}: {data[field]}")

    def create(self, body: Any, owner_id: Optional[UUID] = None):
        data = load_payload(self.schema, body)
        self._check_references(data)
        if self.owner_field:
            data[self.owner_field] = owner_id
        record = self.model(**data)
        try:
            db.session.add(record)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.info("Created %s %s", self.label.lower(), record.id)
        return record

    def update(self, raw_id: Any, body: Any, owner_id: Optional[UUID] = None):
        record = self.get(raw_id, owner_id)
        data = load_payload(self.schema, body, partial=True)
        self._check_references(data)
        self.apply(record, data)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.info("Updated %s %s fields=%s", self.label.lower(), record.id, sorted(data))
        return record

    def delete(self, raw_id: Any, owner_id: Optional[UUID] = None):
        record = self.get(raw_id, owner_id)
        try:
            db.session.delete(record)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.info("Deleted %s %s", self.label.lower(), record.id)

    @staticmethod
    def apply(record, data: Dict[str, Any]):
        for field, value in data.items():
            setattr(record, field, value)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def dump(self, record) -> Dict[str, Any]:
        return self.schema.dump(record)

    def dump_many(self, records) -> List[Dict[str, Any]]:
        return self.schema.dump(records, many=True)
