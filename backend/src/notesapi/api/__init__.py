"""API routers for the Notes API."""

from .attachments import router as attachments_router
from .auth import router as auth_router
from .categories import router as categories_router
from .health import router as health_router
from .notes import router as notes_router
from .search import router as search_router
from .sync import router as sync_router

__all__ = [
    "auth_router",
    "notes_router",
    "categories_router",
    "search_router",
    "sync_router",
    "attachments_router",
    "health_router",
]
