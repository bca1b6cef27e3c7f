"""Authentication middleware (access gate for protected routes)."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import Settings, get_settings
from ..core.exceptions import TokenInvalidError
from ..security import TokenService


@dataclass(frozen=True)
class RequestContext:
    """Per-request auth context. ``user_id`` scopes every data access."""

    user_id: UUID


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    """Token service built from the signing settings."""
    return TokenService.from_settings(settings)


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication.

    Missing or malformed headers and bad tokens fail with ``TOKEN_INVALID``;
    expired tokens fail with ``TOKEN_EXPIRED`` so clients can tell a
    re-login from a refresh.
    """

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(
        self,
        request: Request,
        token_service: TokenService = Depends(get_token_service),
    ) -> RequestContext:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if credentials is None:
            raise TokenInvalidError("Missing token")

        subject = token_service.verify(credentials.credentials)
        try:
            user_id = UUID(subject)
        except ValueError as exc:
            raise TokenInvalidError("Invalid token") from exc

        request.state.user_id = user_id
        return RequestContext(user_id=user_id)


require_auth = JWTBearer()


# Dependency for getting current user ID from JWT
async def get_current_user_id(context: RequestContext = Depends(require_auth)) -> UUID:
    """Get current authenticated user ID."""
    return context.user_id
