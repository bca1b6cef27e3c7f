"""
Service layer interfaces and implementations.
"""

from .interfaces import (
    IAttachmentService,
    IAuthService,
    ICategoryService,
    IHealthService,
    INoteService,
    ISearchService,
    ISyncService,
)

from .attachment_service import AttachmentService
from .auth_service import AuthService
from .category_service import CategoryService
from .health_service import HealthService
from .note_service import NoteService
from .search_service import SearchService
from .sync_service import SyncService

__all__ = [
    # Interfaces
    "IAuthService",
    "ISyncService",
    "INoteService",
    "ICategoryService",
    "ISearchService",
    "IAttachmentService",
    "IHealthService",

    # Implementations
    "AuthService",
    "SyncService",
    "NoteService",
    "CategoryService",
    "SearchService",
    "AttachmentService",
    "HealthService",
]
