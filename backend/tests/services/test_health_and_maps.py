"""Health probes and the maps key endpoint."""

import sports_schedule.infrastructure.database as db_module
from sports_schedule.config import get_settings


async def test_liveness(client):
    resp = await client.get("/api/health/")

    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    resp = await client.get("/api/health/ready")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)

    resp = await client.get("/api/health/ready")

    assert resp.status_code == 503
    assert resp.json()["reason"] == "database_unavailable"


async def test_maps_key_from_settings(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "google_maps_api_key", "browser-key")

    resp = await client.get("/api/maps-key")

    assert resp.status_code == 200
    assert resp.json() == {"key": "browser-key"}
