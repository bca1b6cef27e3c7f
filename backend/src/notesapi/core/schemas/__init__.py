"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .attachments import AttachmentPayload, AttachmentResponse
from .auth import (
    AuthPayload,
    CurrentUserPayload,
    LoginRequest,
    RegisterPayload,
    RegisterRequest,
    UserPublic,
    UserResponse,
)
from .categories import CategoryCreate, CategoryListPayload, CategoryPayload, CategoryResponse
from .common import ApiResponse, ErrorResponse, HealthResponse, PaginationInfo
from .notes import (
    ArchiveRequest,
    BulkDeletePayload,
    BulkDeleteRequest,
    NoteCreate,
    NoteListPayload,
    NotePayload,
    NoteResponse,
    NoteUpdate,
)
from .search import SearchPayload, SearchResult, SearchScope
from .sync import (
    CreatedIds,
    SyncOperationPayload,
    SyncPullPayload,
    SyncPushPayload,
    SyncPushRequest,
    SyncSection,
)

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "LoginRequest",
    "UserPublic",
    "UserResponse",
    "AuthPayload",
    "RegisterPayload",
    "CurrentUserPayload",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NotePayload",
    "NoteListPayload",
    "ArchiveRequest",
    "BulkDeleteRequest",
    "BulkDeletePayload",
    # Category schemas
    "CategoryCreate",
    "CategoryResponse",
    "CategoryPayload",
    "CategoryListPayload",
    # Sync schemas
    "SyncOperationPayload",
    "SyncSection",
    "SyncPushRequest",
    "SyncPullPayload",
    "SyncPushPayload",
    "CreatedIds",
    # Search / attachments
    "SearchScope",
    "SearchResult",
    "SearchPayload",
    "AttachmentResponse",
    "AttachmentPayload",
    # Common schemas
    "ApiResponse",
    "ErrorResponse",
    "PaginationInfo",
    "HealthResponse",
]
