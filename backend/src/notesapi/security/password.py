"""Password hashing utilities."""

from passlib.context import CryptContext
from passlib.exc import UnknownHashError

# bcrypt_sha256 pre-hashes with SHA-256 so passwords longer than
# bcrypt's 72 byte limit are not silently truncated.
pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password with a fresh salt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash (constant time)."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (UnknownHashError, ValueError):
        return False


def needs_update(hashed_password: str) -> bool:
    """Check if password hash needs updating."""
    try:
        return pwd_context.needs_update(hashed_password)
    except (UnknownHashError, ValueError):
        return False
