"""End-to-end tests for attachment upload and delete."""

from pathlib import Path

import pytest


@pytest.fixture
async def note_id(async_client, auth_headers):
    resp = await async_client.post("/v1/notes", json={"title": "with files"}, headers=auth_headers)
    return resp.json()["data"]["note"]["id"]


@pytest.mark.asyncio
async def test_upload_and_delete(async_client, auth_headers, note_id, test_settings):
    resp = await async_client.post(
        f"/v1/notes/{note_id}/attachments",
        files={"file": ("hello.txt", b"hello world", "text/plain")},
        headers=auth_headers,
    )

    assert resp.status_code == 201
    attachment = resp.json()["data"]["attachment"]
    assert attachment["filename"] == "hello.txt"
    assert attachment["size"] == 11
    assert attachment["mime_type"] == "text/plain"
    assert attachment["url"].startswith(f"/files/{note_id}/")

    stored = Path(test_settings.storage_dir) / note_id / attachment["url"].rsplit("/", 1)[1]
    assert stored.read_bytes() == b"hello world"

    deleted = await async_client.delete(f"/v1/attachments/{attachment['id']}", headers=auth_headers)
    assert deleted.status_code == 200
    assert not stored.exists()


@pytest.mark.asyncio
async def test_upload_without_file(async_client, auth_headers, note_id):
    resp = await async_client.post(f"/v1/notes/{note_id}/attachments", headers=auth_headers)

    assert resp.status_code == 400
    assert resp.json()["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_upload_to_foreign_note(async_client, other_auth_headers, note_id):
    resp = await async_client.post(
        f"/v1/notes/{note_id}/attachments",
        files={"file": ("a.txt", b"a", "text/plain")},
        headers=other_auth_headers,
    )

    assert resp.status_code == 404
    assert resp.json()["code"] == "NOTE_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_unknown_attachment(async_client, auth_headers):
    resp = await async_client.delete("/v1/attachments/not-a-uuid", headers=auth_headers)

    assert resp.status_code == 404
    assert resp.json()["code"] == "ATTACHMENT_NOT_FOUND"
