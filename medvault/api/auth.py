"""
Authentication helpers and identity resolution.

The service sits behind oauth2-proxy: the proxy authenticates the browser and
forwards the user's email and name in request headers. An ``IdentityProvider``
turns those headers into an ``Identity`` (upserting the user row) or ``None``
when the request is anonymous.
"""
import uuid
from dataclasses import dataclass
from typing import Optional, Tuple

from sqlalchemy.orm import Session
from starlette.requests import Request

from medvault.db.repositories import users as user_repo


@dataclass(frozen=True)
class Identity:
    user_id: uuid.UUID
    email: str
    display_name: Optional[str] = None


def _normalize_email(email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    return email.strip().lower() or None


def resolve_identity_from_headers(
    x_auth_request_user: Optional[str],
    x_auth_request_email: Optional[str],
    x_forwarded_user: Optional[str],
    x_forwarded_email: Optional[str],
) -> Tuple[Optional[str], Optional[str]]:
    user = x_auth_request_user or x_forwarded_user
    email = _normalize_email(x_auth_request_email or x_forwarded_email)
    return user, email


class IdentityProvider:
    """Resolves the authenticated caller of a request, if any."""

    def resolve(self, request: Request, db: Session) -> Optional[Identity]:
        raise NotImplementedError


def _identity_for(db: Session, email: str, name: Optional[str]) -> Identity:
    user = user_repo.get_or_create_user(db, email=email, display_name=name)
    return Identity(user_id=user.id, email=user.email, display_name=user.display_name)


class ProxyHeaderIdentityProvider(IdentityProvider):
    def resolve(self, request: Request, db: Session) -> Optional[Identity]:
        h = request.headers
        name, email = resolve_identity_from_headers(
            x_auth_request_user=h.get("x-auth-request-user"),
            x_auth_request_email=h.get("x-auth-request-email"),
            x_forwarded_user=h.get("x-forwarded-user"),
            x_forwarded_email=h.get("x-forwarded-email"),
        )
        if not email:
            return None
        return _identity_for(db, email, name)


class DevIdentityProvider(IdentityProvider):
    """Attributes every request to one local account.

    For running the service on a workstation without oauth2-proxy in front.
    Request headers are ignored.
    """

    email = "dev@localhost"
    display_name = "Development User"

    def resolve(self, request: Request, db: Session) -> Optional[Identity]:
        return _identity_for(db, self.email, self.display_name)
