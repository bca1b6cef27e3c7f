"""Attachment API endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.exceptions import NotFoundError
from ..core.schemas.attachments import AttachmentPayload
from ..core.schemas.common import ApiResponse
from ..core.services import AttachmentService
from ..database import get_db_session
from ..middleware.auth import RequestContext, require_auth
from .notes import parse_note_id

router = APIRouter(tags=["attachments"])


def _service(session: AsyncSession, settings: Settings) -> AttachmentService:
    return AttachmentService(session, storage_dir=settings.storage_dir, max_upload_mb=settings.max_upload_mb)


@router.post(
    "/notes/{note_id}/attachments",
    response_model=ApiResponse[AttachmentPayload],
    status_code=status.HTTP_201_CREATED,
)
async def upload_attachment(
    note_id: str,
    file: Optional[UploadFile] = File(None),
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """Upload a file and attach it to a note."""
    attachment = await _service(session, settings).upload(context.user_id, parse_note_id(note_id), file)
    return ApiResponse(message="File uploaded successfully", data=AttachmentPayload(attachment=attachment))


@router.delete("/attachments/{attachment_id}", response_model=ApiResponse[None])
async def delete_attachment(
    attachment_id: str,
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """Delete an attachment and its stored file."""
    try:
        attachment_uuid = UUID(attachment_id)
    except ValueError as exc:
        raise NotFoundError("Attachment not found", code="ATTACHMENT_NOT_FOUND") from exc

    await _service(session, settings).delete(context.user_id, attachment_uuid)
    return ApiResponse(message="Attachment deleted successfully")
