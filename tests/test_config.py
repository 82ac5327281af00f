from __future__ import annotations

import pytest

from records_api.core import config as core_config


@pytest.fixture()
def fresh_settings(monkeypatch):
    for name in ("PORT", "HOST", "RECORD_STORE", "VALIDATE_ON_CREATE", "LOG_LEVEL", "LOG_FILE", "APP_ENV"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./unused.db")
    core_config.get_settings.cache_clear()
    yield core_config.get_settings
    core_config.get_settings.cache_clear()


def test_defaults(fresh_settings):
    settings = fresh_settings()
    assert settings.port == 8000
    assert settings.record_store == "sql"
    assert settings.validate_on_create is False
    assert settings.log_level == "INFO"


def test_environment_overrides(fresh_settings, monkeypatch):
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("RECORD_STORE", "MEMORY")
    monkeypatch.setenv("VALIDATE_ON_CREATE", "yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = fresh_settings()
    assert settings.port == 9001
    assert settings.record_store == "memory"
    assert settings.validate_on_create is True
    assert settings.log_level == "DEBUG"


def test_bad_values_fall_back(fresh_settings, monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    monkeypatch.setenv("RECORD_STORE", "mongo")
    settings = fresh_settings()
    assert settings.port == 8000
    assert settings.record_store == "sql"


def test_log_file_setting(fresh_settings, monkeypatch):
    assert fresh_settings().log_file == ""
    core_config.get_settings.cache_clear()
    monkeypatch.setenv("LOG_FILE", " records.log ")
    assert fresh_settings().log_file == "records.log"


def test_setup_logging_writes_to_log_file(tmp_path, monkeypatch):
    import logging

    from records_api.core.logging_config import setup_logging

    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    log_path = tmp_path / "records.log"

    setup_logging("INFO", str(log_path))
    try:
        logging.getLogger("records_api.test").info("written to file")
        for handler in root.handlers:
            handler.flush()
        assert "written to file" in log_path.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
