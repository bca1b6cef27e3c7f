"""Unit tests for NoteService (src/notesapi/core/services/note_service.py)."""

import uuid

import pytest

from notesapi.core.exceptions import NotFoundError, ValidationError
from notesapi.core.schemas.notes import NoteCreate, NoteUpdate
from notesapi.core.services.note_service import NoteService


@pytest.mark.asyncio
async def test_create_and_get_note(test_session, test_user):
    svc = NoteService(test_session)
    created = await svc.create_note(
        test_user.id, NoteCreate(title="Hello", content="body", category="work", tags=["b", "a"])
    )

    fetched = await svc.get_note(created.id, test_user.id)

    assert fetched.title == "Hello"
    assert fetched.tags == ["b", "a"]
    assert fetched.category == "work"
    assert fetched.archived is False


@pytest.mark.asyncio
@pytest.mark.parametrize("title", ["", "   "])
async def test_create_note_requires_title(test_session, test_user, title):
    with pytest.raises(ValidationError) as exc:
        await NoteService(test_session).create_note(test_user.id, NoteCreate(title=title))
    assert exc.value.details == {"title": "Title cannot be empty"}


@pytest.mark.asyncio
async def test_other_users_note_is_not_found(test_session, test_user, other_user):
    svc = NoteService(test_session)
    note = await svc.create_note(test_user.id, NoteCreate(title="mine"))

    with pytest.raises(NotFoundError) as exc:
        await svc.get_note(note.id, other_user.id)
    assert exc.value.code == "NOTE_NOT_FOUND"

    with pytest.raises(NotFoundError):
        await svc.update_note(note.id, other_user.id, NoteUpdate(title="stolen"))


@pytest.mark.asyncio
async def test_update_replaces_editable_fields(test_session, test_user):
    svc = NoteService(test_session)
    note = await svc.create_note(test_user.id, NoteCreate(title="a", tags=["x"]))

    updated = await svc.update_note(note.id, test_user.id, NoteUpdate(title="b", content="c"))

    assert updated.title == "b"
    assert updated.content == "c"
    assert updated.tags == []


@pytest.mark.asyncio
async def test_soft_deleted_note_disappears(test_session, test_user):
    svc = NoteService(test_session)
    note = await svc.create_note(test_user.id, NoteCreate(title="a"))

    await svc.delete_note(note.id, test_user.id)

    with pytest.raises(NotFoundError):
        await svc.get_note(note.id, test_user.id)
    listed = await svc.list_user_notes(test_user.id)
    assert listed.notes == []


@pytest.mark.asyncio
async def test_archive_moves_note_between_lists(test_session, test_user):
    svc = NoteService(test_session)
    note = await svc.create_note(test_user.id, NoteCreate(title="a"))

    archived = await svc.archive_note(note.id, test_user.id, True)

    assert archived.archived is True
    assert (await svc.list_user_notes(test_user.id)).notes == []
    assert [n.id for n in (await svc.list_user_notes(test_user.id, archived=True)).notes] == [note.id]


@pytest.mark.asyncio
async def test_list_paginates_and_searches(test_session, test_user):
    svc = NoteService(test_session)
    for i in range(5):
        await svc.create_note(test_user.id, NoteCreate(title=f"Note {i}", content="alpha" if i % 2 else "beta"))

    page = await svc.list_user_notes(test_user.id, page=2, per_page=2)
    assert len(page.notes) == 2
    assert page.pagination.total_items == 5
    assert page.pagination.total_pages == 3
    assert page.pagination.current_page == 2

    found = await svc.list_user_notes(test_user.id, search="ALPHA")
    assert found.pagination.total_items == 2


@pytest.mark.asyncio
async def test_bulk_delete_reports_unparseable_ids(test_session, test_user, other_user):
    svc = NoteService(test_session)
    mine = await svc.create_note(test_user.id, NoteCreate(title="a"))
    theirs = await svc.create_note(other_user.id, NoteCreate(title="b"))

    result = await svc.bulk_delete(test_user.id, [str(mine.id), str(theirs.id), "bogus"])

    assert result.deleted_count == 1
    assert result.failed_ids == ["bogus"]
    assert (await svc.get_note(theirs.id, other_user.id)).title == "b"


@pytest.mark.asyncio
async def test_bulk_delete_requires_ids(test_session, test_user):
    with pytest.raises(ValidationError):
        await NoteService(test_session).bulk_delete(test_user.id, [])


@pytest.mark.asyncio
async def test_delete_missing_note_is_silent(test_session, test_user):
    assert await NoteService(test_session).delete_note(uuid.uuid4(), test_user.id) is None
