"""Note service implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NotFoundError, ValidationError
from ..logging import get_logger
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..schemas.common import PaginationInfo
from ..schemas.notes import (
    BulkDeletePayload,
    NoteCreate,
    NoteListPayload,
    NoteResponse,
    NoteUpdate,
)
from .interfaces import INoteService

logger = get_logger("notes")


def note_not_found() -> NotFoundError:
    return NotFoundError("Note not found", code="NOTE_NOT_FOUND")


def parse_uuid(value: str) -> Optional[UUID]:
    try:
        return UUID(str(value))
    except ValueError:
        return None


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    @staticmethod
    def _check_title(request: NoteCreate) -> None:
        if not request.title.strip():
            raise ValidationError(details={"title": "Title cannot be empty"})

    @staticmethod
    def _editable_fields(request: NoteCreate) -> dict:
        return {
            "title": request.title,
            "content": request.content,
            "category": request.category,
            "tags": list(request.tags),
        }

    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        self._check_title(request)

        note = await self.note_repo.create_note(
            {"user_id": user_id, "archived": False, **self._editable_fields(request)}
        )
        logger.debug("Note created", extra={"user_id": str(user_id), "note_id": str(note.id)})
        return NoteResponse.model_validate(note)

    async def get_note(self, note_id: UUID, user_id: UUID) -> NoteResponse:
        """Get note by ID. Other users' notes look exactly like missing ones."""
        note = await self.note_repo.get_by_id_and_user(note_id, user_id)
        if not note:
            raise note_not_found()
        return NoteResponse.model_validate(note)

    async def update_note(self, note_id: UUID, user_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Replace title, content, category and tags."""
        note = await self.note_repo.get_by_id_and_user(note_id, user_id)
        if not note:
            raise note_not_found()

        self._check_title(request)

        note = await self.note_repo.update_note(note_id, user_id, self._editable_fields(request))
        if not note:
            raise note_not_found()
        return NoteResponse.model_validate(note)

    async def delete_note(self, note_id: UUID, user_id: UUID) -> None:
        """Soft delete. Deleting a missing note is not an error."""
        await self.note_repo.soft_delete(note_id, user_id)

    async def archive_note(self, note_id: UUID, user_id: UUID, archived: bool) -> NoteResponse:
        note = await self.note_repo.update_note(note_id, user_id, {"archived": archived})
        if not note:
            raise note_not_found()
        return NoteResponse.model_validate(note)

    async def bulk_delete(self, user_id: UUID, note_ids: List[str]) -> BulkDeletePayload:
        """Soft delete several notes; ids that are not UUIDs are reported back as failed."""
        if not note_ids:
            raise ValidationError("Invalid request")

        parsed: List[UUID] = []
        failed: List[str] = []
        for raw in note_ids:
            value = parse_uuid(raw)
            if value is None:
                failed.append(raw)
            else:
                parsed.append(value)

        deleted = await self.note_repo.bulk_soft_delete(parsed, user_id)
        logger.info("Bulk delete", extra={"user_id": str(user_id), "deleted": deleted})
        return BulkDeletePayload(deleted_count=deleted, failed_ids=failed)

    async def list_user_notes(
        self,
        user_id: UUID,
        page: int = 1,
        per_page: int = 20,
        search: Optional[str] = None,
        archived: bool = False,
    ) -> NoteListPayload:
        """List user notes with pagination."""
        notes, total = await self.note_repo.list_user_notes(
            user_id=user_id, page=page, per_page=per_page, search=search, archived=archived
        )
        return NoteListPayload(
            notes=[NoteResponse.model_validate(n) for n in notes],
            pagination=PaginationInfo.create(total=total, page=page, per_page=per_page),
        )

    async def get_owned_note(self, note_id: UUID, user_id: UUID) -> Note:
        """Raw owned note for other services (attachments)."""
        note = await self.note_repo.get_by_id_and_user(note_id, user_id)
        if not note:
            raise note_not_found()
        return note
