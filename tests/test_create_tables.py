from __future__ import annotations

from sqlalchemy import inspect

from records_api.core import config as core_config
from records_api.db import create_tables
from records_api.db import models
from records_api.db import session as db_session


def test_main_creates_records_table(temp_db):
    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    assert "records" not in inspect(engine).get_table_names()

    assert create_tables.main() == 0
    assert "records" in inspect(engine).get_table_names()


def test_main_reports_missing_database_url(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    try:
        assert create_tables.main() == 1
    finally:
        core_config.get_settings.cache_clear()
        db_session.get_engine.cache_clear()
