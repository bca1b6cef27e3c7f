"""Attachment repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.attachment import Attachment
from ..models.note import Note


class AttachmentRepository:
    """Attachments are owned through their note."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_attachment(self, data: dict) -> Attachment:
        attachment = Attachment(**data)
        self.session.add(attachment)
        await self.session.commit()
        await self.session.refresh(attachment)
        return attachment

    async def get_by_id_and_user(self, attachment_id: UUID, user_id: UUID) -> Optional[Attachment]:
        stmt = (
            select(Attachment)
            .join(Note, Note.id == Attachment.note_id)
            .where(
                and_(
                    Attachment.id == attachment_id,
                    Note.user_id == user_id,
                    Note.deleted_at.is_(None),
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_attachment(self, attachment: Attachment) -> None:
        await self.session.delete(attachment)
        await self.session.commit()
