"""
Medical profile procedures.

The profile lives on the caller's own user row, so there is nothing to look
up by id: the resolved identity is the only target.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from medvault.api.auth import Identity
from medvault.api.deps import require_identity
from medvault.api.records import RPC_PREFIX
from medvault.db import schemas
from medvault.db.database import get_db
from medvault.db.repositories import users as user_repo

logger = logging.getLogger("medvault.records")

router = APIRouter(prefix=RPC_PREFIX, tags=["medicalProfile"])


def _load_user(db: Session, identity: Identity):
    user = user_repo.get_user(db, identity.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Record not found")
    return user


@router.get("/getMedicalProfile", response_model=schemas.MedicalProfile)
def get_medical_profile(
    identity: Identity = Depends(require_identity),
    db: Session = Depends(get_db),
):
    return _load_user(db, identity)


@router.post("/updateMedicalProfile", response_model=schemas.MedicalProfile)
def update_medical_profile(
    payload: schemas.MedicalProfileUpdate,
    identity: Identity = Depends(require_identity),
    db: Session = Depends(get_db),
):
    user = _load_user(db, identity)
    changes = payload.changes()
    user = user_repo.update_profile(db, user, changes)
    logger.info("profile_update: owner=%s fields=%s", identity.user_id, sorted(changes))
    return user
