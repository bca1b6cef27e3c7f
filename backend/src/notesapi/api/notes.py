"""Notes API endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.exceptions import NotFoundError
from ..core.schemas.common import ApiResponse
from ..core.schemas.notes import (
    ArchiveRequest,
    BulkDeletePayload,
    BulkDeleteRequest,
    NoteCreate,
    NoteListPayload,
    NotePayload,
    NoteUpdate,
)
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import RequestContext, require_auth

router = APIRouter(prefix="/notes", tags=["notes"])


def parse_note_id(note_id: str) -> UUID:
    """Path ids that are not UUIDs cannot name an existing note."""
    try:
        return UUID(note_id)
    except ValueError as exc:
        raise NotFoundError("Note not found", code="NOTE_NOT_FOUND") from exc


@router.get("", response_model=ApiResponse[NoteListPayload])
async def list_notes(
    search: Optional[str] = Query(None),
    archived: bool = Query(False),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """List user notes, optionally filtered by a search term and archive flag."""
    per_page = min(limit or settings.default_page_size, settings.max_page_size)
    note_service = NoteService(session)
    payload = await note_service.list_user_notes(
        user_id=context.user_id,
        page=page,
        per_page=per_page,
        search=search,
        archived=archived,
    )
    return ApiResponse(data=payload)


@router.post("/bulk-delete", response_model=ApiResponse[BulkDeletePayload])
async def bulk_delete(
    request: BulkDeleteRequest,
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete several notes at once."""
    note_service = NoteService(session)
    payload = await note_service.bulk_delete(context.user_id, request.note_ids)
    return ApiResponse(message="bulk delete", data=payload)


@router.get("/{note_id}", response_model=ApiResponse[NotePayload])
async def get_note(
    note_id: str,
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note_service = NoteService(session)
    note = await note_service.get_note(parse_note_id(note_id), context.user_id)
    return ApiResponse(data=NotePayload(note=note))


@router.post("", response_model=ApiResponse[NotePayload], status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    note = await note_service.create_note(context.user_id, request)
    return ApiResponse(message="Note created successfully", data=NotePayload(note=note))


@router.put("/{note_id}", response_model=ApiResponse[NotePayload])
async def update_note(
    note_id: str,
    request: NoteUpdate,
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note."""
    note_service = NoteService(session)
    note = await note_service.update_note(parse_note_id(note_id), context.user_id, request)
    return ApiResponse(message="Note updated successfully", data=NotePayload(note=note))


@router.delete("/{note_id}", response_model=ApiResponse[None])
async def delete_note(
    note_id: str,
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note (soft delete)."""
    note_service = NoteService(session)
    await note_service.delete_note(parse_note_id(note_id), context.user_id)
    return ApiResponse(message="Note deleted successfully")


@router.post("/{note_id}/archive", response_model=ApiResponse[NotePayload])
async def archive_note(
    note_id: str,
    request: ArchiveRequest,
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
):
    """Archive or unarchive a note."""
    note_service = NoteService(session)
    note = await note_service.archive_note(parse_note_id(note_id), context.user_id, request.archived)
    return ApiResponse(message="Note archived successfully", data=NotePayload(note=note))
