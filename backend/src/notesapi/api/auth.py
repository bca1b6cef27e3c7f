"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import (
    AuthPayload,
    CurrentUserPayload,
    LoginRequest,
    RegisterPayload,
    RegisterRequest,
)
from ..core.schemas.common import ApiResponse
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import RequestContext, get_token_service, require_auth
from ..security import TokenService

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    response_model=ApiResponse[RegisterPayload],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    session: AsyncSession = Depends(get_db_session),
    token_service: TokenService = Depends(get_token_service),
):
    """Register a new user."""
    auth_service = AuthService(session, token_service)
    payload = await auth_service.register_user(request)
    return ApiResponse(message="User registered successfully", data=payload)


@router.post("/login", response_model=ApiResponse[AuthPayload])
async def login(
    request: LoginRequest,
    session: AsyncSession = Depends(get_db_session),
    token_service: TokenService = Depends(get_token_service),
):
    """Login user and get a bearer token."""
    auth_service = AuthService(session, token_service)
    payload = await auth_service.authenticate_user(request)
    return ApiResponse(message="Login successful", data=payload)


@router.post("/logout", response_model=ApiResponse[None])
async def logout(
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
    token_service: TokenService = Depends(get_token_service),
):
    """Logout user. Tokens are stateless, the client just forgets its token."""
    auth_service = AuthService(session, token_service)
    await auth_service.logout_user(context.user_id)
    return ApiResponse(message="Logout successful")


@router.get("/me", response_model=ApiResponse[CurrentUserPayload])
async def get_current_user(
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
    token_service: TokenService = Depends(get_token_service),
):
    """Get current user profile."""
    auth_service = AuthService(session, token_service)
    user = await auth_service.get_current_user(context.user_id)
    return ApiResponse(data=CurrentUserPayload(user=user))
