"""Unit tests for request/response schemas."""

import pytest
from pydantic import ValidationError

from notesapi.core.schemas.auth import LoginRequest, RegisterRequest
from notesapi.core.schemas.common import ApiResponse, PaginationInfo
from notesapi.core.schemas.notes import NoteCreate
from notesapi.core.schemas.sync import SyncPushRequest


class TestRegisterRequest:
    def test_valid(self):
        req = RegisterRequest(email="A@x.com", password="secret1", name="A")
        assert req.email == "A@x.com"

    @pytest.mark.parametrize("email", ["", "no-at", "a@b", "a b@x.com"])
    def test_rejects_bad_email(self, email):
        with pytest.raises(ValidationError):
            RegisterRequest(email=email, password="secret1", name="A")

    def test_rejects_short_password(self):
        with pytest.raises(ValidationError):
            RegisterRequest(email="a@x.com", password="12345", name="A")

    @pytest.mark.parametrize("name", ["", "n" * 101])
    def test_rejects_bad_name(self, name):
        with pytest.raises(ValidationError):
            RegisterRequest(email="a@x.com", password="secret1", name=name)

    def test_login_requires_password(self):
        with pytest.raises(ValidationError):
            LoginRequest(email="a@x.com", password="")


def test_note_create_defaults():
    note = NoteCreate()
    assert note.title == ""
    assert note.content == ""
    assert note.tags == []


def test_note_title_length_limit():
    with pytest.raises(ValidationError):
        NoteCreate(title="t" * 201)


def test_sync_payload_is_lenient():
    batch = SyncPushRequest.model_validate(
        {"notes": {"create": [{"id": 7, "title": ["x"], "content": "c", "extra": True}]}}
    )
    op = batch.notes.create[0]

    assert op.id is None
    assert op.title is None
    assert op.content == "c"
    assert batch.categories is None


@pytest.mark.parametrize("total,per_page,pages", [(0, 20, 0), (20, 20, 1), (21, 20, 2)])
def test_pagination_pages(total, per_page, pages):
    assert PaginationInfo.create(total=total, page=1, per_page=per_page).total_pages == pages


@pytest.mark.parametrize(
    "body",
    [
        {"tags": 5},
        {"notes": {"create": [], "archive": "x"}},
        {"notes": {"create": "x"}},
        {"notes": {"create": [5]}},
        {"notes": []},
    ],
)
def test_sync_batch_shape_is_enforced_for_every_kind(body):
    with pytest.raises(ValidationError):
        SyncPushRequest.model_validate(body)


def test_sync_batch_accepts_unknown_kinds_of_the_right_shape():
    batch = SyncPushRequest.model_validate(
        {"tags": {"create": [{"id": "t1"}]}, "notes": {"archive": [], "create": None}}
    )

    assert batch.notes.create is None


def test_sync_null_entry_is_an_empty_payload():
    batch = SyncPushRequest.model_validate({"notes": {"create": [None]}})
    op = batch.notes.create[0]

    assert (op.id, op.title, op.content) == (None, None, None)


def test_envelope_omits_unset_message_and_data():
    assert ApiResponse().model_dump() == {"success": True}
    assert ApiResponse[dict](message="ok", data={"a": None}).model_dump() == {
        "success": True,
        "message": "ok",
        "data": {"a": None},
    }
