"""Unit tests for NoteRepository (src/notesapi/core/repositories/note_repository.py)."""

import uuid

import pytest

from notesapi.core.repositories.note_repository import NoteRepository


@pytest.mark.asyncio
async def test_get_by_id_and_user_scopes_by_owner(test_session, test_user, other_user):
    repo = NoteRepository(test_session)
    note = await repo.create_note({"user_id": test_user.id, "title": "a"})

    assert (await repo.get_by_id_and_user(note.id, test_user.id)).id == note.id
    assert await repo.get_by_id_and_user(note.id, other_user.id) is None


@pytest.mark.asyncio
async def test_update_note_for_wrong_owner_returns_none(test_session, test_user, other_user):
    repo = NoteRepository(test_session)
    note = await repo.create_note({"user_id": test_user.id, "title": "a"})

    assert await repo.update_note(note.id, other_user.id, {"title": "b"}) is None
    assert (await repo.get_by_id_and_user(note.id, test_user.id)).title == "a"


@pytest.mark.asyncio
async def test_soft_delete_keeps_row(test_session, test_user):
    repo = NoteRepository(test_session)
    note = await repo.create_note({"user_id": test_user.id, "title": "a"})

    assert await repo.soft_delete(note.id, test_user.id) is True
    assert note.is_deleted is True
    assert await repo.get_by_id_and_user(note.id, test_user.id) is None
    assert await repo.soft_delete(note.id, test_user.id) is False


@pytest.mark.asyncio
async def test_bulk_soft_delete_counts_only_owned(test_session, test_user, other_user):
    repo = NoteRepository(test_session)
    mine = await repo.create_note({"user_id": test_user.id, "title": "a"})
    theirs = await repo.create_note({"user_id": other_user.id, "title": "b"})

    deleted = await repo.bulk_soft_delete([mine.id, theirs.id, uuid.uuid4()], test_user.id)

    assert deleted == 1
    assert await repo.bulk_soft_delete([], test_user.id) == 0


@pytest.mark.asyncio
async def test_recently_updated_respects_limit(test_session, test_user):
    repo = NoteRepository(test_session)
    for i in range(3):
        await repo.create_note({"user_id": test_user.id, "title": f"n{i}"})

    assert len(await repo.recently_updated(test_user.id, limit=2)) == 2


@pytest.mark.asyncio
async def test_tags_keep_their_order(test_session, test_user):
    repo = NoteRepository(test_session)
    note = await repo.create_note({"user_id": test_user.id, "title": "a", "tags": ["z", "a", "m"]})
    test_session.expire(note)

    fetched = await repo.get_by_id_and_user(note.id, test_user.id)
    assert fetched.tags == ["z", "a", "m"]
