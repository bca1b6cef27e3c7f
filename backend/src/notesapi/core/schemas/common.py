"""
Shared response schemas - envelope, pagination, health
"""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field, model_serializer

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every successful API response."""

    success: bool = Field(default=True, description="Operation success status")
    message: Optional[str] = Field(default=None, description="Human-readable message")
    data: Optional[T] = Field(default=None, description="Response payload")

    @model_serializer(mode="wrap")
    def drop_empty_keys(self, handler):
        # message and data are only sent when set
        body = handler(self)
        for key in ("message", "data"):
            if body.get(key) is None:
                body.pop(key, None)
        return body

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "message": "Note created successfully",
                "data": {"note": {"id": "123e4567-e89b-12d3-a456-426614174000"}},
            }
        }
    }


class ErrorResponse(BaseModel):
    """Envelope for failed requests."""

    success: bool = Field(default=False)
    error: str = Field(description="Human-readable error message")
    code: Optional[str] = Field(default=None, description="Stable machine readable error code")

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": False,
                "error": "Invalid credentials",
                "code": "INVALID_CREDENTIALS",
            }
        }
    }


class PaginationInfo(BaseModel):
    """Page info for list endpoints"""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int

    @classmethod
    def create(cls, total: int, page: int, per_page: int) -> "PaginationInfo":
        # calculate page count
        pages = (total + per_page - 1) // per_page
        return cls(
            current_page=page,
            total_pages=pages,
            total_items=total,
            items_per_page=per_page,
        )


class HealthResponse(BaseModel):
    """Liveness response."""

    status: str = Field(default="ok")
    time: datetime
