# project_manager/db/repository.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, Mapping, Optional, Type, TypeVar

from sqlalchemy import select

from project_manager.db.base import Base

if TYPE_CHECKING:
    from project_manager.db.store import Store

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """
    Create / get / list / update / delete for one table.

    Rows come back detached from their session; the store keeps attributes
    loaded after commit, so they can be read freely by the caller.
    """

    def __init__(self, store: "Store", model: Type[ModelT], *, label: str):
        self.store = store
        self.model = model
        self.label = label

    def create(self, **values: Any) -> ModelT:
        with self.store.session() as db:
            record = self.model(**values)
            db.add(record)
            db.flush()
            db.refresh(record)
        logger.debug("Inserted %s id=%s", self.label, record.id)
        return record

    def get(self, record_id: int) -> Optional[ModelT]:
        with self.store.session() as db:
            return db.get(self.model, record_id)

    def list(self) -> list[ModelT]:
        stmt = select(self.model).order_by(self.model.id)
        with self.store.session() as db:
            return list(db.execute(stmt).scalars().all())

    def update(self, record_id: int, values: Mapping[str, Any]) -> Optional[ModelT]:
        with self.store.session() as db:
            record = db.get(self.model, record_id)
            if record is None:
                return None
            for k, v in values.items():
                setattr(record, k, v)
            db.flush()
            db.refresh(record)
        logger.debug("Updated %s id=%s fields=%s", self.label, record_id, sorted(values))
        return record

    def delete(self, record_id: int) -> bool:
        with self.store.session() as db:
            record = db.get(self.model, record_id)
            if record is None:
                return False
            db.delete(record)
        logger.debug("Deleted %s id=%s", self.label, record_id)
        return True
