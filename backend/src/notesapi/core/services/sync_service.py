"""Sync service implementation.

Pull returns the caller's most recently updated notes and categories, all
reported under ``created``; there is no change feed, tombstones or
versioning behind it. Push only applies ``notes.create``; the other
operation kinds and the ``categories`` kind are accepted and ignored, and
no conflict detection happens.
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..logging import get_logger
from ..repositories.category_repository import CategoryRepository
from ..repositories.note_repository import NoteRepository
from ..schemas.categories import CategoryResponse
from ..schemas.notes import NoteResponse
from ..schemas.sync import (
    CategoryChanges,
    CreatedIds,
    NoteChanges,
    SyncOperationPayload,
    SyncPullPayload,
    SyncPushPayload,
    SyncPushRequest,
)
from .interfaces import ISyncService

logger = get_logger("sync")

# column width of notes.title
TITLE_MAX_LENGTH = 200


class SyncService(ISyncService):
    """Pull/push sync for a single owner."""

    def __init__(self, session: AsyncSession, pull_limit: int = 100):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.category_repo = CategoryRepository(session)
        self.pull_limit = pull_limit

    async def pull(self, user_id: UUID) -> SyncPullPayload:
        """Snapshot of the owner's most recently updated entities."""
        notes = await self.note_repo.recently_updated(user_id, limit=self.pull_limit)
        categories = await self.category_repo.recently_updated(user_id, limit=self.pull_limit)

        logger.info(
            "Sync pull",
            extra={"user_id": str(user_id), "notes": len(notes), "categories": len(categories)},
        )

        return SyncPullPayload(
            notes=NoteChanges(created=[NoteResponse.model_validate(n) for n in notes]),
            categories=CategoryChanges(
                created=[CategoryResponse.model_validate(c) for c in categories]
            ),
            sync_timestamp=datetime.now(timezone.utc),
        )

    async def push(self, user_id: UUID, batch: SyncPushRequest) -> SyncPushPayload:
        """Apply client creates and map local ids to server ids."""
        created_notes = await self._create_notes(user_id, self._creates(batch))

        logger.info(
            "Sync push",
            extra={"user_id": str(user_id), "created_notes": len(created_notes)},
        )

        return SyncPushPayload(
            conflicts=[],
            created_ids=CreatedIds(notes=created_notes, categories={}),
            sync_timestamp=datetime.now(timezone.utc),
        )

    @staticmethod
    def _creates(batch: SyncPushRequest) -> List[SyncOperationPayload]:
        if batch.notes is None or not batch.notes.create:
            return []
        return batch.notes.create

    async def _create_notes(
        self, user_id: UUID, payloads: List[SyncOperationPayload]
    ) -> Dict[str, str]:
        mapping: Dict[str, str] = {}
        if not payloads:
            return mapping

        for payload in payloads:
            server_id = uuid.uuid4()
            # no validation here, unlike POST /notes: missing fields are empty
            # and over-long titles are cut to fit the column
            await self.note_repo.create_note(
                {
                    "id": server_id,
                    "user_id": user_id,
                    "title": (payload.title or "")[:TITLE_MAX_LENGTH],
                    "content": payload.content or "",
                    "tags": [],
                    "archived": False,
                },
                commit=False,
            )
            if payload.id:
                mapping[payload.id] = str(server_id)

        await self.session.commit()
        return mapping
