"""
API dependency helpers.

Every procedure depends on ``require_identity``; the identity provider itself
is a dependency too, so tests and alternative deployments can swap it through
``app.dependency_overrides[get_identity_provider]``.
"""
import logging
import os
from typing import Optional
from urllib.parse import urlparse

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session
from starlette.requests import Request

from medvault.api.auth import DevIdentityProvider, Identity, IdentityProvider, ProxyHeaderIdentityProvider
from medvault.db.database import get_db

logger = logging.getLogger("medvault.auth")

LOOPBACK_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})


def _dev_identity_requested() -> bool:
    return os.getenv("DEV_MODE", "false").strip().lower() == "true"


def get_identity_provider() -> IdentityProvider:
    """Pick the provider for this request.

    DEV_MODE swaps in ``DevIdentityProvider`` only while APP_BASE_URL is a
    loopback URL; any other configuration refuses to serve.
    """
    if not _dev_identity_requested():
        return ProxyHeaderIdentityProvider()
    host = urlparse(os.getenv("APP_BASE_URL", "").strip()).hostname
    if host not in LOOPBACK_HOSTS:
        logger.error("DEV_MODE refused: APP_BASE_URL host %r is not a loopback address", host)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="DEV_MODE misconfigured")
    return DevIdentityProvider()


def get_current_identity(
    request: Request,
    db: Session = Depends(get_db),
    provider: IdentityProvider = Depends(get_identity_provider),
) -> Optional[Identity]:
    return provider.resolve(request, db)


# Contract:
# Returns the resolved Identity.
# Raises 401 with no further detail when the request is anonymous.
def require_identity(identity: Optional[Identity] = Depends(get_current_identity)) -> Identity:
    if identity is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    return identity
