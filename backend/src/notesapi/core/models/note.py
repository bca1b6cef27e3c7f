# Note model for user content
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID, StringListType


class Note(BaseModel):
    """Note owned by exactly one user."""

    __tablename__ = "notes"

    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    tags: Mapped[List[str]] = mapped_column(StringListType, nullable=False, default=list)
    archived: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # soft delete marker, rows with a value are invisible to every query
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        CheckConstraint("length(title) <= 200", name="ck_notes_title_len"),
        CheckConstraint("category IS NULL OR length(category) <= 50", name="ck_notes_category_len"),
        Index("idx_notes_user_id", "user_id"),
        Index("idx_notes_user_updated", "user_id", "updated_at"),
        Index("idx_notes_deleted_at", "deleted_at"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', user_id={self.user_id})>"

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        return self.user_id == user_id

    def soft_delete(self) -> None:
        """Mark the note deleted without removing the row."""
        self.deleted_at = datetime.now(timezone.utc)
