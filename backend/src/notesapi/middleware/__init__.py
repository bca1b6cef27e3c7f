"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, RequestContext, get_current_user_id, get_token_service, require_auth

__all__ = ["JWTBearer", "RequestContext", "get_current_user_id", "get_token_service", "require_auth"]
