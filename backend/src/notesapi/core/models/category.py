# Categories for grouping notes
import uuid
from typing import Optional

from sqlalchemy import CheckConstraint, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


class Category(BaseModel):
    """User defined category with an optional hex color."""

    __tablename__ = "categories"

    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    color: Mapped[Optional[str]] = mapped_column(String(7), nullable=True)  # hex colors

    __table_args__ = (
        CheckConstraint("length(name) <= 50", name="ck_categories_name_len"),
        CheckConstraint("color IS NULL OR length(color) <= 7", name="ck_categories_color_len"),
        Index("idx_categories_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<Category(name='{self.name}')>"
