from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import String, create_engine, inspect

from medvault.db import models

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"


def _config(url: str) -> Config:
    cfg = Config(str(ALEMBIC_INI))
    cfg.set_main_option("sqlalchemy.url", url)
    return cfg


def test_upgrade_creates_every_model_table_and_downgrade_removes_them(tmp_path, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("TEST_DATABASE_URL", raising=False)
    url = f"sqlite:///{tmp_path / 'migrations.db'}"
    cfg = _config(url)

    command.upgrade(cfg, "head")
    engine = create_engine(url)
    try:
        tables = set(inspect(engine).get_table_names())
        assert set(models.Base.metadata.tables) <= tables

        columns = {c["name"] for c in inspect(engine).get_columns("prescriptions")}
        assert set(models.Prescription.__table__.columns.keys()) == columns

        command.downgrade(cfg, "base")
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()


def test_text_columns_carry_no_length_limit(tmp_path, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("TEST_DATABASE_URL", raising=False)
    url = f"sqlite:///{tmp_path / 'lengths.db'}"
    command.upgrade(_config(url), "head")
    engine = create_engine(url)
    try:
        insp = inspect(engine)
        for table in models.Base.metadata.sorted_tables:
            text_columns = {c.name for c in table.columns if isinstance(c.type, String)}
            assert all(table.c[name].type.length is None for name in text_columns), table.name
            migrated = {c["name"]: c["type"] for c in insp.get_columns(table.name)}
            for name in text_columns:
                assert getattr(migrated[name], "length", None) is None, f"{table.name}.{name}"
    finally:
        engine.dispose()
