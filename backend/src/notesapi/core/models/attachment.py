# Files attached to notes
import uuid

from sqlalchemy import BigInteger, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


class Attachment(BaseModel):
    """Metadata for a file copied into the storage directory."""

    __tablename__ = "attachments"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    mime_type: Mapped[str] = mapped_column(String(100), nullable=False)
    size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    storage_path: Mapped[str] = mapped_column(String(512), nullable=False)

    __table_args__ = (Index("idx_attachments_note_id", "note_id"),)

    def __repr__(self) -> str:
        return f"<Attachment(file_name='{self.file_name}', note_id={self.note_id})>"
