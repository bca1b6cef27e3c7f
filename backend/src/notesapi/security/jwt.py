"""JWT bearer token issuing and verification."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from ..config import Settings
from ..core.exceptions import TokenExpiredError, TokenInvalidError


class TokenService:
    """Issues and verifies stateless, signed, time bounded access tokens.

    Tokens carry only the subject (user id) and the expiry. Nothing is
    stored server side, so a token stays valid for its whole lifetime and
    logging out is the client discarding it.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_hours: int = 24):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_delta = timedelta(hours=expire_hours)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expire_hours=settings.token_expire_hours,
        )

    def issue(self, subject_id: UUID | str, expires_delta: Optional[timedelta] = None) -> str:
        """Create a signed token for the subject."""
        expire = datetime.now(timezone.utc) + (expires_delta or self.expire_delta)
        claims = {"sub": str(subject_id), "exp": expire}
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        """Decode and validate signature and expiry, returning the claims."""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except JWTError as exc:
            raise TokenInvalidError() from exc

    def verify(self, token: str) -> str:
        """Return the subject of a valid token."""
        if not token:
            raise TokenInvalidError("Missing token")

        claims = self.decode(token)
        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise TokenInvalidError("Token missing user")
        return subject
