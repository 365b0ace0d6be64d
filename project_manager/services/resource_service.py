# project_manager/services/resource_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, Generic, Sequence, Type, TypeVar

from pydantic import BaseModel

from project_manager.db.repository import Repository
from project_manager.errors import NotFoundError, ValidationError
from project_manager.schemas.common import MessageResponse, encode_stacks

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=BaseModel)

STACKS_FIELD = "stacks"


class ResourceService(Generic[ItemT]):
    """
    Create / list / get / update / delete for one resource type.

    Every resource follows the same contract:

    - create: required fields must be non-empty; `stacks` defaults to [].
    - update: sparse merge. A field overwrites the stored value only when it
      is present and non-empty. Empty string and "not sent" are the same
      thing here, so a field can never be cleared through an update.
    - get / update / delete on an unknown id raise NotFoundError.
    """

    def __init__(
        self,
        repository: Repository,
        item_schema: Type[ItemT],
        *,
        required_fields: Sequence[str],
    ):
        self.repository = repository
        self.item_schema = item_schema
        self.required_fields = tuple(required_fields)
        self.label = repository.label
        self._columns = set(repository.model.__table__.columns.keys())

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def create(self, payload: BaseModel) -> ItemT:
        data = payload.model_dump()

        for field in self.required_fields:
            if not data.get(field):
                raise ValidationError(f"{self.label} {self._wire_name(payload, field)} is required")

        values: Dict[str, Any] = {}
        for k, v in data.items():
            if k not in self._columns:
                continue
            if k == STACKS_FIELD:
                values[k] = encode_stacks(v)
            else:
                values[k] = v if v is not None else ""

        record = self.repository.create(**values)
        logger.info("Created %s id=%s name=%s", self.label.lower(), record.id, record.name)
        return self._to_item(record)

    def list_all(self) -> list[ItemT]:
        records = self.repository.list()
        logger.debug("Listing %s records (count=%d)", self.label.lower(), len(records))
        return [self._to_item(r) for r in records]

    def get(self, record_id: int) -> ItemT:
        record = self.repository.get(record_id)
        if record is None:
            raise NotFoundError(self.label, record_id)
        return self._to_item(record)

    def update(self, record_id: int, payload: BaseModel) -> ItemT:
        changes = self.merge_changes(payload)

        if STACKS_FIELD in changes:
            changes[STACKS_FIELD] = encode_stacks(changes[STACKS_FIELD])

        if not changes:
            # nothing to write, but the id must still exist
            return self.get(record_id)

        record = self.repository.update(record_id, changes)
        if record is None:
            raise NotFoundError(self.label, record_id)
        logger.info("Updated %s id=%s fields=%s", self.label.lower(), record_id, sorted(changes))
        return self._to_item(record)

    def delete(self, record_id: int) -> MessageResponse:
        if not self.repository.delete(record_id):
            raise NotFoundError(self.label, record_id)
        logger.info("Deleted %s id=%s", self.label.lower(), record_id)
        return MessageResponse(message=f"{self.label} deleted successfully")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def merge_changes(self, payload: BaseModel) -> Dict[str, Any]:
        """Return only the fields that should overwrite stored values."""
        return {
            k: v
            for k, v in payload.model_dump().items()
            if k in self._columns and v  # "" / None / [] are all "leave as is"
        }

    @staticmethod
    def _wire_name(payload: BaseModel, field: str) -> str:
        info = type(payload).model_fields.get(field)
        return info.alias if info is not None and info.alias else field

    def _to_item(self, record: Any) -> ItemT:
        return self.item_schema.model_validate(record)
