"""
Smoke test of the full stack against a temporary SQLite database.
"""
from __future__ import annotations

from fastapi.testclient import TestClient

from records_api.app import create_app
from records_api.core import config as core_config


def test_crud_flow_on_sqlite(temp_db, monkeypatch):
    monkeypatch.setenv("RECORD_STORE", "sql")
    core_config.get_settings.cache_clear()
    app = create_app()
    with TestClient(app) as client:
        created = client.post(
            "/api/records",
            json={"name": "Alice", "email": "alice@example.com", "phoneNumber": "555-1234"},
        ).json()["data"]
        assert created["createdAt"].endswith("Z")

        resp = client.put(
            f"/api/records/{created['id']}",
            json={"name": "Alice", "email": "alice@new.example", "phoneNumber": "555-1234"},
        )
        assert resp.status_code == 200

        listing = client.get("/api/records").json()
        assert listing["count"] == 1
        assert listing["data"][0]["email"] == "alice@new.example"
        assert listing["data"][0]["createdAt"] == created["createdAt"]

        assert client.delete(f"/api/records/{created['id']}").status_code == 200
        assert client.get(f"/api/records/{created['id']}").status_code == 404
