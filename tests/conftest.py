from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the records_api package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from records_api.app import create_app  # noqa: E402
from records_api.core import config as core_config  # noqa: E402
from records_api.db import models  # noqa: E402
from records_api.db import session as db_session  # noqa: E402
from records_api.repositories import InMemoryRecordRepository  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and tear it down completely afterwards."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    _clear_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=engine)
    except Exception:
        pass
    try:
        engine.dispose()
    except Exception:
        pass
    _clear_caches()


@pytest.fixture()
def settings(monkeypatch):
    monkeypatch.setenv("RECORD_STORE", "memory")
    monkeypatch.delenv("VALIDATE_ON_CREATE", raising=False)
    _clear_caches()
    yield core_config.get_settings()
    _clear_caches()


@pytest.fixture()
def repository():
    return InMemoryRecordRepository()


@pytest.fixture()
def client(settings, repository):
    app = create_app(settings=settings, repository=repository)
    with TestClient(app) as test_client:
        yield test_client
