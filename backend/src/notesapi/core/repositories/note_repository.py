"""Note repository for database operations.

Every method takes the owner id and filters on it; soft-deleted rows are
never returned.
"""

from datetime import datetime, timezone
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note


def _like(term: str) -> str:
    return f"%{term.lower()}%"


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _owned(self, user_id: UUID):
        return and_(Note.user_id == user_id, Note.deleted_at.is_(None))

    async def create_note(self, note_data: dict, commit: bool = True) -> Note:
        """Create new note."""
        note = Note(**note_data)
        self.session.add(note)
        if commit:
            await self.session.commit()
            await self.session.refresh(note)
        return note

    async def get_by_id_and_user(self, note_id: UUID, user_id: UUID) -> Optional[Note]:
        """Get note by ID if owned by user."""
        stmt = select(Note).where(and_(Note.id == note_id, self._owned(user_id)))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_note(self, note_id: UUID, user_id: UUID, update_data: dict) -> Optional[Note]:
        """Update note if owned by user."""
        note = await self.get_by_id_and_user(note_id, user_id)
        if not note:
            return None

        for key, value in update_data.items():
            setattr(note, key, value)

        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def soft_delete(self, note_id: UUID, user_id: UUID) -> bool:
        """Soft delete note if owned by user."""
        note = await self.get_by_id_and_user(note_id, user_id)
        if not note:
            return False

        note.soft_delete()
        await self.session.commit()
        return True

    async def bulk_soft_delete(self, note_ids: Sequence[UUID], user_id: UUID) -> int:
        """Soft delete every listed note owned by user, returns rows affected."""
        if not note_ids:
            return 0

        stmt = (
            update(Note)
            .where(and_(Note.id.in_(list(note_ids)), self._owned(user_id)))
            .values(deleted_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount or 0

    async def list_user_notes(
        self,
        user_id: UUID,
        page: int = 1,
        per_page: int = 20,
        search: Optional[str] = None,
        archived: bool = False,
    ) -> tuple[List[Note], int]:
        """List user notes with pagination, substring search and archive filter."""
        offset = (page - 1) * per_page

        conditions = [self._owned(user_id), Note.archived == archived]
        if search:
            conditions.append(
                or_(func.lower(Note.title).like(_like(search)), func.lower(Note.content).like(_like(search)))
            )

        count_stmt = select(func.count(Note.id)).where(*conditions)
        total_result = await self.session.execute(count_stmt)
        total_count = total_result.scalar() or 0

        stmt = (
            select(Note)
            .where(*conditions)
            .order_by(desc(Note.updated_at))
            .offset(offset)
            .limit(per_page)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total_count

    async def recently_updated(self, user_id: UUID, limit: int = 100) -> List[Note]:
        """Most recently updated notes of the user, newest first."""
        stmt = (
            select(Note)
            .where(self._owned(user_id))
            .order_by(desc(Note.updated_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def search_notes(
        self, user_id: UUID, query: str, in_title: bool = True, in_content: bool = True, limit: int = 50
    ) -> List[Note]:
        """Case-insensitive substring search over title and/or content."""
        like = _like(query)
        clauses = []
        if in_title:
            clauses.append(func.lower(Note.title).like(like))
        if in_content:
            clauses.append(func.lower(Note.content).like(like))

        stmt = (
            select(Note)
            .where(self._owned(user_id), or_(*clauses))
            .order_by(desc(Note.updated_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
