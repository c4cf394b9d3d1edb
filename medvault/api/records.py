"""
Owner-scoped record procedures.

``build_record_router`` produces, for one record kind, the four procedures
``get<Kind>s``, ``add<Kind>``, ``update<Kind>`` and ``delete<Kind>``. Each one
requires an identity and passes the caller's id to the repository, which
filters every statement by owner.
"""
import logging
import uuid
from typing import List

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session

from medvault.api.auth import Identity
from medvault.api.deps import require_identity
from medvault.api.record_kinds import RecordKind
from medvault.db.database import get_db

logger = logging.getLogger("medvault.records")

RPC_PREFIX = "/rpc"


def _not_found() -> HTTPException:
    # Same answer whether the id is unknown or owned by someone else
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Record not found")


def build_record_router(kind: RecordKind) -> APIRouter:
    router = APIRouter(prefix=RPC_PREFIX, tags=[kind.tag])
    repo = kind.repository()

    @router.get(f"/get{kind.plural}", response_model=List[kind.read_schema], name=f"get{kind.plural}")
    def list_records(
        identity: Identity = Depends(require_identity),
        db: Session = Depends(get_db),
    ):
        return repo.list_owned(db, identity.user_id)

    @router.post(f"/add{kind.name}", response_model=kind.read_schema, name=f"add{kind.name}")
    def add_record(
        payload: kind.create_schema,
        identity: Identity = Depends(require_identity),
        db: Session = Depends(get_db),
    ):
        record = repo.create_owned(db, identity.user_id, payload)
        logger.info("record_create: kind=%s id=%s owner=%s", kind.name, record.id, identity.user_id)
        return record

    @router.post(f"/update{kind.name}", response_model=kind.read_schema, name=f"update{kind.name}")
    def update_record(
        payload: kind.update_schema,
        identity: Identity = Depends(require_identity),
        db: Session = Depends(get_db),
    ):
        changes = payload.changes()
        record = repo.update_owned(db, identity.user_id, payload.id, changes)
        if record is None:
            raise _not_found()
        logger.info(
            "record_update: kind=%s id=%s owner=%s fields=%s",
            kind.name, record.id, identity.user_id, sorted(changes),
        )
        return record

    @router.post(f"/delete{kind.name}", response_model=kind.read_schema, name=f"delete{kind.name}")
    def delete_record(
        record_id: uuid.UUID = Body(...),
        identity: Identity = Depends(require_identity),
        db: Session = Depends(get_db),
    ):
        record = repo.delete_owned(db, identity.user_id, record_id)
        if record is None:
            raise _not_found()
        logger.info("record_delete: kind=%s id=%s owner=%s", kind.name, record_id, identity.user_id)
        return record

    return router
