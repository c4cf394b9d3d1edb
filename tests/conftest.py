import pytest
from fastapi.testclient import TestClient

from medvault.api.main import app
from medvault.db import models
from medvault.db.database import SessionLocal, engine


@pytest.fixture(autouse=True)
def _identity_env(monkeypatch):
    """Requests authenticate through proxy headers unless a test opts into DEV_MODE."""
    for var in ("DEV_MODE", "APP_BASE_URL"):
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture(autouse=True)
def _fresh_schema():
    # In-memory sqlite shared through StaticPool; rebuild so every test starts empty
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)
