"""Search service implementation.

Plain case-insensitive substring matching, no ranking: every hit gets the
same relevance score.
"""

import time
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ValidationError
from ..repositories.note_repository import NoteRepository
from ..schemas.search import SearchPayload, SearchResult, SearchScope
from .interfaces import ISearchService


class SearchService(ISearchService):
    def __init__(self, session: AsyncSession, result_limit: int = 50):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.result_limit = result_limit

    async def search_notes(self, user_id: UUID, query: str, scope: Optional[str] = None) -> SearchPayload:
        if not query:
            raise ValidationError("Missing q")

        search_scope = SearchScope.parse(scope)
        started = time.perf_counter()
        notes = await self.note_repo.search_notes(
            user_id,
            query,
            in_title=search_scope in (SearchScope.TITLE, SearchScope.BOTH),
            in_content=search_scope in (SearchScope.CONTENT, SearchScope.BOTH),
            limit=self.result_limit,
        )
        elapsed_ms = int((time.perf_counter() - started) * 1000)

        results = [
            SearchResult(
                id=n.id,
                title=n.title,
                content=n.content,
                category=n.category,
                tags=list(n.tags or []),
                created_at=n.created_at,
            )
            for n in notes
        ]
        return SearchPayload(results=results, total_results=len(results), search_time_ms=elapsed_ms)
