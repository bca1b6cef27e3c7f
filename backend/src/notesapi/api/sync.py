"""Sync API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.schemas.common import ApiResponse
from ..core.schemas.sync import SyncPullPayload, SyncPushPayload, SyncPushRequest
from ..core.services import SyncService
from ..database import get_db_session
from ..middleware.auth import RequestContext, require_auth

router = APIRouter(prefix="/sync", tags=["sync"])


@router.get("", response_model=ApiResponse[SyncPullPayload])
async def pull(
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """Pull the most recently updated notes and categories."""
    sync_service = SyncService(session, pull_limit=settings.sync_pull_limit)
    return ApiResponse(data=await sync_service.pull(context.user_id))


@router.post("", response_model=ApiResponse[SyncPushPayload])
async def push(
    batch: SyncPushRequest,
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """Push a batch of client side changes."""
    sync_service = SyncService(session, pull_limit=settings.sync_pull_limit)
    payload = await sync_service.push(context.user_id, batch)
    return ApiResponse(message="Sync completed successfully", data=payload)
