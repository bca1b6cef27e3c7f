"""Repository layer for data access."""

from .attachment_repository import AttachmentRepository
from .category_repository import CategoryRepository
from .note_repository import NoteRepository
from .user_repository import UserRepository

__all__ = [
    "UserRepository",
    "NoteRepository",
    "CategoryRepository",
    "AttachmentRepository",
]
