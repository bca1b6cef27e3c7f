"""
Sync protocol schemas.

A push body maps entity kind -> operation kind -> list of payloads, e.g.::

    {"notes": {"create": [{"id": "local1", "title": "T", "content": "C"}]}}

Payload fields are deliberately lenient: anything that is not a string is
treated as missing, and missing fields default later instead of failing.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from .categories import CategoryResponse
from .notes import NoteResponse


class SyncOperationPayload(BaseModel):
    """One client side change. ``id`` is the client-local identifier."""

    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None

    model_config = ConfigDict(extra="allow")

    @model_validator(mode="before")
    @classmethod
    def null_is_empty(cls, data):
        # a null entry is an empty payload
        return {} if data is None else data

    @field_validator("id", "title", "content", mode="before")
    @classmethod
    def drop_non_strings(cls, v):
        return v if isinstance(v, str) else None


class SyncSection(BaseModel):
    """Operations for a single entity kind."""

    create: Optional[List[SyncOperationPayload]] = None
    update: Optional[List[SyncOperationPayload]] = None
    delete: Optional[List[SyncOperationPayload]] = None


_BATCH_SHAPE = TypeAdapter(
    Dict[str, Optional[Dict[str, Optional[List[SyncOperationPayload]]]]]
)


class SyncPushRequest(BaseModel):
    notes: Optional[SyncSection] = None
    categories: Optional[SyncSection] = None

    @model_validator(mode="before")
    @classmethod
    def check_batch_shape(cls, data):
        """Every kind, known or not, must map operation kinds to lists of objects."""
        if isinstance(data, cls):
            return data
        try:
            _BATCH_SHAPE.validate_python(data)
        except PydanticValidationError as exc:
            raise ValueError(f"Malformed sync batch: {exc.error_count()} error(s)") from exc
        return data

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "notes": {"create": [{"id": "local1", "title": "T", "content": "C"}]},
                "categories": {},
            }
        },
    )


class NoteChanges(BaseModel):
    created: List[NoteResponse] = Field(default_factory=list)
    updated: List[NoteResponse] = Field(default_factory=list)
    deleted: List[str] = Field(default_factory=list)


class CategoryChanges(BaseModel):
    created: List[CategoryResponse] = Field(default_factory=list)
    updated: List[CategoryResponse] = Field(default_factory=list)
    deleted: List[str] = Field(default_factory=list)


class SyncPullPayload(BaseModel):
    notes: NoteChanges
    categories: CategoryChanges
    sync_timestamp: datetime


class CreatedIds(BaseModel):
    """Client-local id -> server id, per entity kind."""

    notes: Dict[str, str] = Field(default_factory=dict)
    categories: Dict[str, str] = Field(default_factory=dict)


class SyncPushPayload(BaseModel):
    conflicts: List[Any] = Field(default_factory=list)
    created_ids: CreatedIds = Field(default_factory=CreatedIds)
    sync_timestamp: datetime
