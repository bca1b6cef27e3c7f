"""Health endpoints and app wiring."""

import pytest

from notesapi.main import app


@pytest.mark.asyncio
async def test_basic_health(async_client):
    resp = await async_client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.json()["time"]


@pytest.mark.asyncio
async def test_versioned_health_and_database(async_client):
    assert (await async_client.get("/v1/health")).json()["status"] == "ok"

    db = await async_client.get("/v1/health/database")
    assert db.status_code == 200
    assert db.json()["connected"] is True


def test_expected_routes_are_registered():
    routes = {
        (method, route.path)
        for route in app.routes
        if hasattr(route, "methods")
        for method in route.methods
    }

    for expected in [
        ("POST", "/v1/auth/register"),
        ("POST", "/v1/auth/login"),
        ("POST", "/v1/auth/logout"),
        ("GET", "/v1/auth/me"),
        ("GET", "/v1/sync"),
        ("POST", "/v1/sync"),
        ("GET", "/v1/notes"),
        ("POST", "/v1/notes/bulk-delete"),
        ("POST", "/v1/notes/{note_id}/attachments"),
        ("DELETE", "/v1/attachments/{attachment_id}"),
        ("GET", "/v1/categories"),
        ("GET", "/v1/search"),
        ("GET", "/health"),
    ]:
        assert expected in routes
