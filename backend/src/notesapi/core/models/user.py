"""
User model for authentication.
"""

from sqlalchemy import CheckConstraint, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class User(BaseModel):
    """User account with email/password auth.

    Emails are stored and matched exactly as submitted; there is no case
    folding, so ``A@x.com`` and ``a@x.com`` are two different accounts.
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        CheckConstraint("length(name) <= 100", name="ck_users_name_len"),
        CheckConstraint("length(email) <= 255", name="ck_users_email_len"),
        Index("idx_users_email", "email"),
    )

    def __repr__(self) -> str:
        return f"<User(email='{self.email}')>"
