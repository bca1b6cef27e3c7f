"""
Database models for the Notes API.

Models included:
    - User: account with email/password authentication
    - Note: owned note with category label, tags, archive flag and soft delete
    - Category: owned category with optional color
    - Attachment: file stored for a note
"""

from .attachment import Attachment
from .base import BaseModel
from .category import Category
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
    "Category",
    "Attachment",
]
