"""
Owner-scoped repository shared by every record kind.

Each instance wraps one ORM model that carries an ``owner_id`` column. Every
query it issues is filtered by the owner, so a caller can never read, change
or remove another user's rows: a record that exists but belongs to someone
else is reported exactly like a missing one (``None``).
"""
from __future__ import annotations

import uuid
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel
from sqlalchemy.orm import Session


class OwnedRecordRepository:
    def __init__(
        self,
        model,
        *,
        sort_key: str = "created_at",
        descending: bool = True,
        server_defaults: Optional[Mapping[str, Any]] = None,
    ):
        self.model = model
        self.sort_key = sort_key
        self.descending = descending
        self.server_defaults = dict(server_defaults or {})

    def _owned(self, db: Session, owner_id: uuid.UUID):
        return db.query(self.model).filter(self.model.owner_id == owner_id)

    def _ordering(self):
        columns = [getattr(self.model, self.sort_key)]
        # Date columns tie often; creation time keeps the order stable
        if self.sort_key != "created_at":
            columns.append(self.model.created_at)
        return [c.desc() if self.descending else c.asc() for c in columns]

    def list_owned(self, db: Session, owner_id: uuid.UUID) -> List[Any]:
        return self._owned(db, owner_id).order_by(*self._ordering()).all()

    def get_owned(self, db: Session, owner_id: uuid.UUID, record_id: uuid.UUID):
        return self._owned(db, owner_id).filter(self.model.id == record_id).first()

    def create_owned(self, db: Session, owner_id: uuid.UUID, payload: BaseModel):
        data: Dict[str, Any] = payload.model_dump()
        data.update(self.server_defaults)
        # Owner always comes from the resolved identity, never from input
        data["owner_id"] = owner_id
        record = self.model(**data)
        db.add(record)
        db.commit()
        db.refresh(record)
        return record

    def update_owned(self, db: Session, owner_id: uuid.UUID, record_id: uuid.UUID, changes: Mapping[str, Any]):
        record = self.get_owned(db, owner_id, record_id)
        if record is None:
            return None
        for key, value in changes.items():
            if key in ("id", "owner_id"):
                continue
            setattr(record, key, value)
        db.commit()
        db.refresh(record)
        return record

    def delete_owned(self, db: Session, owner_id: uuid.UUID, record_id: uuid.UUID):
        """Remove the record and return it as it was; ``None`` when not owned."""
        record = self.get_owned(db, owner_id, record_id)
        if record is None:
            return None
        db.delete(record)
        db.commit()
        return record
