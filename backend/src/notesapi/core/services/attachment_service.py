"""Attachment service: copies uploads into the storage directory."""

import uuid
from datetime import datetime, timezone
from pathlib import Path
from uuid import UUID

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import FileTooLargeError, NotFoundError, ValidationError
from ..logging import get_logger
from ..repositories.attachment_repository import AttachmentRepository
from ..schemas.attachments import AttachmentResponse
from .interfaces import IAttachmentService
from .note_service import NoteService

logger = get_logger("attachments")

CHUNK_SIZE = 1024 * 1024


class AttachmentService(IAttachmentService):
    def __init__(self, session: AsyncSession, storage_dir: str, max_upload_mb: int = 10):
        self.session = session
        self.attachment_repo = AttachmentRepository(session)
        self.note_service = NoteService(session)
        self.storage_dir = Path(storage_dir)
        self.max_bytes = max_upload_mb * 1024 * 1024

    async def upload(self, user_id: UUID, note_id: UUID, file: UploadFile) -> AttachmentResponse:
        note = await self.note_service.get_owned_note(note_id, user_id)

        if file is None or not file.filename:
            raise ValidationError("File is required")
        if file.size is not None and file.size > self.max_bytes:
            raise FileTooLargeError()

        attachment_id = uuid.uuid4()
        original_name = Path(file.filename).name
        stored_name = f"{attachment_id}_{original_name}"
        target_dir = self.storage_dir / str(note.id)
        target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / stored_name

        size = 0
        with target.open("wb") as out:
            while True:
                chunk = await file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > self.max_bytes:
                    break
                await run_in_threadpool(out.write, chunk)

        if size > self.max_bytes:
            target.unlink(missing_ok=True)
            raise FileTooLargeError()

        mime_type = file.content_type or "application/octet-stream"
        try:
            attachment = await self.attachment_repo.create_attachment(
                {
                    "id": attachment_id,
                    "note_id": note.id,
                    "file_name": original_name,
                    "mime_type": mime_type,
                    "size": size,
                    "storage_path": str(target),
                }
            )
        except Exception:
            # no row, no file
            target.unlink(missing_ok=True)
            raise
        logger.info(
            "Attachment stored",
            extra={"user_id": str(user_id), "note_id": str(note.id), "size": size},
        )

        return AttachmentResponse(
            id=attachment.id,
            filename=original_name,
            size=size,
            mime_type=mime_type,
            url=f"/files/{note.id}/{stored_name}",
            uploaded_at=attachment.created_at or datetime.now(timezone.utc),
        )

    async def delete(self, user_id: UUID, attachment_id: UUID) -> None:
        attachment = await self.attachment_repo.get_by_id_and_user(attachment_id, user_id)
        if not attachment:
            raise NotFoundError("Attachment not found", code="ATTACHMENT_NOT_FOUND")

        path = Path(attachment.storage_path)
        await self.attachment_repo.delete_attachment(attachment)
        path.unlink(missing_ok=True)
