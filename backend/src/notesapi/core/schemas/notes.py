"""
Note management schemas.

These schemas define the API contracts for note CRUD, archiving and bulk
deletion.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import PaginationInfo


class NoteCreate(BaseModel):
    """Note creation / replacement request schema.

    Title emptiness is checked by the service so the error can point at the
    offending field.
    """

    title: str = Field(default="", max_length=200, description="Note title")
    content: str = Field(default="", description="Note content")
    category: Optional[str] = Field(default=None, max_length=50, description="Category label")
    tags: List[str] = Field(default_factory=list, description="Ordered tags")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Hello",
                "content": "First note",
                "category": "personal",
                "tags": ["ideas", "todo"],
            }
        }
    )


class NoteUpdate(NoteCreate):
    """Note update request schema (full replacement of the editable fields)."""


class NoteResponse(BaseModel):
    """Note as returned to its owner."""

    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    content: str
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    archived: bool = False
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NotePayload(BaseModel):
    note: NoteResponse


class NoteListPayload(BaseModel):
    notes: List[NoteResponse]
    pagination: PaginationInfo


class ArchiveRequest(BaseModel):
    archived: bool = Field(default=False, description="New archived flag")


class BulkDeleteRequest(BaseModel):
    note_ids: List[str] = Field(default_factory=list, description="Ids of notes to delete")


class BulkDeletePayload(BaseModel):
    deleted_count: int
    failed_ids: List[str] = Field(default_factory=list)
