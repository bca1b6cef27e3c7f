"""Search schemas."""

import uuid
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class SearchScope(str, Enum):
    TITLE = "title"
    CONTENT = "content"
    BOTH = "both"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SearchScope":
        """Unknown scopes search both fields."""
        try:
            return cls((value or "both").lower())
        except ValueError:
            return cls.BOTH


class SearchMatches(BaseModel):
    title: List[str] = Field(default_factory=list)
    content: List[str] = Field(default_factory=list)


class SearchResult(BaseModel):
    id: uuid.UUID
    title: str
    content: str
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    relevance_score: float = 0.5
    matches: SearchMatches = Field(default_factory=SearchMatches)
    created_at: datetime


class SearchPayload(BaseModel):
    results: List[SearchResult]
    total_results: int
    search_time_ms: int
