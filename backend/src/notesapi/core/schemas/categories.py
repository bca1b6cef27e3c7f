"""Category schemas."""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreate(BaseModel):
    """Category create / update request."""

    name: str = Field(min_length=1, max_length=50, description="Category name")
    color: Optional[str] = Field(default=None, max_length=7, description="Hex color, e.g. #ff8800")

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Work", "color": "#336699"}}
    )


class CategoryResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    name: str
    color: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CategoryPayload(BaseModel):
    category: CategoryResponse


class CategoryListPayload(BaseModel):
    categories: List[CategoryResponse]
