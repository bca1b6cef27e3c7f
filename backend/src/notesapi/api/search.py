"""Search API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.schemas.common import ApiResponse
from ..core.schemas.search import SearchPayload
from ..core.services import SearchService
from ..database import get_db_session
from ..middleware.auth import RequestContext, require_auth

router = APIRouter(prefix="/search", tags=["search"])


@router.get("", response_model=ApiResponse[SearchPayload])
async def search_notes(
    q: Optional[str] = Query(None, description="Substring to look for"),
    in_: Optional[str] = Query("both", alias="in", description="title, content or both"),
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """Search the user's notes."""
    search_service = SearchService(session, result_limit=settings.search_result_limit)
    return ApiResponse(data=await search_service.search_notes(context.user_id, q or "", in_))
