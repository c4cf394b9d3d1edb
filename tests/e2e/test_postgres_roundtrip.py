import os
import shutil
import subprocess
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from medvault.api.main import app
from medvault.db.database import get_db

postgres = pytest.importorskip("testcontainers.postgres")

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"


def _docker_available() -> bool:
    if os.getenv("SKIP_DOCKER_TESTS") == "1":
        return False
    if not shutil.which("docker"):
        return False
    try:
        proc = subprocess.run(["docker", "info"], capture_output=True, text=True, timeout=5)
    except (OSError, subprocess.TimeoutExpired):
        return False
    return proc.returncode == 0


def _h(user: str):
    return {"x-auth-request-user": user, "x-auth-request-email": f"{user}@example.com"}


@pytest.mark.e2e
def test_owner_scoping_against_migrated_postgres(monkeypatch):
    if not _docker_available():
        pytest.skip("Docker is not available; skipping PostgreSQL e2e test")

    image = os.getenv("TEST_POSTGRES_IMAGE", "postgres:16-alpine")
    with postgres.PostgresContainer(image) as pg:
        url = pg.get_connection_url()
        monkeypatch.setenv("TEST_DATABASE_URL", url)
        cfg = Config(str(ALEMBIC_INI))
        cfg.set_main_option("sqlalchemy.url", url)
        command.upgrade(cfg, "head")

        engine = create_engine(url)
        Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

        def _override_get_db():
            db = Session()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _override_get_db
        try:
            client = TestClient(app)
            created = client.post(
                "/rpc/addPrescription",
                json={"doctorName": "Dr. Kim", "medication": "Amoxicillin", "dosage": "250mg", "frequency": "3x daily", "startDate": "2024-02-01"},
                headers=_h("alice"),
            )
            assert created.status_code == 200, created.text
            rx = created.json()
            assert rx["status"] == "Active"
            assert rx["refills"] == 0

            stolen = client.post("/rpc/updatePrescription", json={"id": rx["id"], "refills": 9}, headers=_h("bob"))
            assert stolen.status_code == 404
            assert client.get("/rpc/getPrescriptions", headers=_h("bob")).json() == []

            renewed = client.post("/rpc/updatePrescription", json={"id": rx["id"], "refills": 1}, headers=_h("alice"))
            assert renewed.json()["refills"] == 1

            removed = client.post("/rpc/deletePrescription", json=rx["id"], headers=_h("alice"))
            assert removed.status_code == 200
            assert client.get("/rpc/getPrescriptions", headers=_h("alice")).json() == []
        finally:
            app.dependency_overrides.pop(get_db, None)
            engine.dispose()
