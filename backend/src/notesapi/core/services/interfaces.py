"""
Service interfaces for the Notes API.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from fastapi import UploadFile

from ..schemas.attachments import AttachmentResponse
from ..schemas.auth import AuthPayload, LoginRequest, RegisterPayload, RegisterRequest, UserResponse
from ..schemas.categories import CategoryCreate, CategoryResponse
from ..schemas.notes import BulkDeletePayload, NoteCreate, NoteListPayload, NoteResponse, NoteUpdate
from ..schemas.search import SearchPayload
from ..schemas.sync import SyncPullPayload, SyncPushPayload, SyncPushRequest


class IAuthService(ABC):
    """Auth service for registration and login."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> RegisterPayload:
        """Register new user and issue a token."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> AuthPayload:
        """Login user and issue a token."""
        pass

    @abstractmethod
    async def logout_user(self, user_id: UUID) -> None:
        """Logout user."""
        pass

    @abstractmethod
    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""
        pass


class ISyncService(ABC):
    """Pull/push sync for offline clients."""

    @abstractmethod
    async def pull(self, user_id: UUID) -> SyncPullPayload:
        """Snapshot of recent changes."""
        pass

    @abstractmethod
    async def push(self, user_id: UUID, batch: SyncPushRequest) -> SyncPushPayload:
        """Apply a batch of client side changes."""
        pass


class INoteService(ABC):
    """Note service for CRUD operations."""

    @abstractmethod
    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def get_note(self, note_id: UUID, user_id: UUID) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def update_note(self, note_id: UUID, user_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Update existing note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: UUID, user_id: UUID) -> None:
        """Delete note."""
        pass

    @abstractmethod
    async def archive_note(self, note_id: UUID, user_id: UUID, archived: bool) -> NoteResponse:
        """Set archived flag."""
        pass

    @abstractmethod
    async def bulk_delete(self, user_id: UUID, note_ids: List[str]) -> BulkDeletePayload:
        """Delete several notes at once."""
        pass

    @abstractmethod
    async def list_user_notes(
        self,
        user_id: UUID,
        page: int = 1,
        per_page: int = 20,
        search: Optional[str] = None,
        archived: bool = False,
    ) -> NoteListPayload:
        """List user notes with pagination."""
        pass


class ICategoryService(ABC):
    """Category CRUD."""

    @abstractmethod
    async def list_categories(self, user_id: UUID) -> List[CategoryResponse]:
        pass

    @abstractmethod
    async def create_category(self, user_id: UUID, request: CategoryCreate) -> CategoryResponse:
        pass

    @abstractmethod
    async def update_category(
        self, category_id: UUID, user_id: UUID, request: CategoryCreate
    ) -> CategoryResponse:
        pass

    @abstractmethod
    async def delete_category(self, category_id: UUID, user_id: UUID) -> None:
        pass


class ISearchService(ABC):
    """Substring search over notes."""

    @abstractmethod
    async def search_notes(self, user_id: UUID, query: str, scope: Optional[str] = None) -> SearchPayload:
        """Search notes."""
        pass


class IAttachmentService(ABC):
    """Attachment storage."""

    @abstractmethod
    async def upload(self, user_id: UUID, note_id: UUID, file: UploadFile) -> AttachmentResponse:
        pass

    @abstractmethod
    async def delete(self, user_id: UUID, attachment_id: UUID) -> None:
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass
