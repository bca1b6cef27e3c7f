"""Authentication service implementation."""

import uuid
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...security import TokenService, hash_password, needs_update, verify_password
from ..exceptions import EmailExistsError, InvalidCredentialsError, NotFoundError
from ..logging import get_logger
from ..repositories.user_repository import UserRepository
from ..schemas.auth import (
    AuthPayload,
    LoginRequest,
    RegisterPayload,
    RegisterRequest,
    UserPublic,
    UserResponse,
)
from .interfaces import IAuthService

logger = get_logger("auth")


class AuthService(IAuthService):
    """Registration and login on top of the user store and the token service."""

    def __init__(self, session: AsyncSession, token_service: TokenService):
        self.session = session
        self.user_repo = UserRepository(session)
        self.token_service = token_service

    async def register_user(self, request: RegisterRequest) -> RegisterPayload:
        """Register new user."""
        # exact match, emails are not case folded
        if await self.user_repo.is_email_taken(request.email):
            raise EmailExistsError()

        user_data = {
            "id": uuid.uuid4(),
            "name": request.name,
            "email": request.email,
            "password_hash": hash_password(request.password),
        }

        try:
            user = await self.user_repo.create_user(user_data)
        except IntegrityError as exc:
            # lost a race against a concurrent registration with the same email
            await self.session.rollback()
            raise EmailExistsError() from exc

        token = self.token_service.issue(user.id)
        logger.info("User registered", extra={"user_id": str(user.id)})

        return RegisterPayload(user=UserResponse.model_validate(user), token=token)

    async def authenticate_user(self, request: LoginRequest) -> AuthPayload:
        """Login user and return a fresh token."""
        user = await self.user_repo.get_by_email(request.email)
        if not user or not verify_password(request.password, user.password_hash):
            logger.info("Login failed")
            raise InvalidCredentialsError()

        if needs_update(user.password_hash):
            # hash scheme or cost changed since the password was stored
            await self.user_repo.update_password_hash(user, hash_password(request.password))

        token = self.token_service.issue(user.id)
        logger.info("User logged in", extra={"user_id": str(user.id)})

        return AuthPayload(user=UserPublic.model_validate(user), token=token)

    async def logout_user(self, user_id: UUID) -> None:
        """Nothing to revoke: tokens are stateless and the client drops its copy."""
        logger.info("User logged out", extra={"user_id": str(user_id)})

    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found", code="USER_NOT_FOUND")
        return UserResponse.model_validate(user)
