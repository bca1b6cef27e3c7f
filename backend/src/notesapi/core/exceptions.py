"""
Application error taxonomy.

Every error a client can act on carries an HTTP status and a stable code.
The exception handlers in ``main`` turn them into the JSON envelope
``{"success": false, "error": ..., "code": ...}``.
"""

from typing import Any, Dict, Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: Optional[str] = None
    message: str = "Request failed"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.message
        if code is not None:
            self.code = code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"success": False, "error": self.message}
        if self.code:
            body["code"] = self.code
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    message = "Validation failed"


class EmailExistsError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "EMAIL_EXISTS"
    message = "Email already exists"


class InvalidCredentialsError(AppError):
    """Login failure. Never says whether the email or the password was wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "INVALID_CREDENTIALS"
    message = "Invalid credentials"


class TokenInvalidError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "TOKEN_INVALID"
    message = "Invalid token"


class TokenExpiredError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "TOKEN_EXPIRED"
    message = "Token expired"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    message = "Resource not found"


class FileTooLargeError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "FILE_TOO_LARGE"
    message = "File too large"


class InternalFailure(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = None
    message = "Internal server error"
