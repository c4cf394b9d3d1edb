"""
User repository functions.

Upserts users by email and edits the medical profile stored on the user row.
"""
from __future__ import annotations

import uuid
from typing import Any, Mapping, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from medvault.db import models


def get_user(db: Session, user_id: uuid.UUID) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email).first()


def get_or_create_user(db: Session, email: str, display_name: Optional[str] = None) -> models.User:
    user = get_user_by_email(db, email)
    if user:
        return user
    user = models.User(
        email=email,
        display_name=display_name or email.split("@")[0],
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # A concurrent request created the same user first
        db.rollback()
        return get_user_by_email(db, email)
    db.refresh(user)
    return user


def update_profile(db: Session, user: models.User, changes: Mapping[str, Any]) -> models.User:
    for key, value in changes.items():
        setattr(user, key, value)
    db.commit()
    db.refresh(user)
    return user
