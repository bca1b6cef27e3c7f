"""Security utilities."""

from .jwt import TokenService
from .password import hash_password, needs_update, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "needs_update",
    "TokenService",
]
