"""Category repository for database operations."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.category import Category


class CategoryRepository:
    """Repository for category database operations, always owner scoped."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_category(self, data: dict) -> Category:
        category = Category(**data)
        self.session.add(category)
        await self.session.commit()
        await self.session.refresh(category)
        return category

    async def get_by_id_and_user(self, category_id: UUID, user_id: UUID) -> Optional[Category]:
        stmt = select(Category).where(and_(Category.id == category_id, Category.user_id == user_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_user_categories(self, user_id: UUID) -> List[Category]:
        stmt = select(Category).where(Category.user_id == user_id).order_by(Category.created_at)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def recently_updated(self, user_id: UUID, limit: int = 100) -> List[Category]:
        stmt = (
            select(Category)
            .where(Category.user_id == user_id)
            .order_by(desc(Category.updated_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update_category(
        self, category_id: UUID, user_id: UUID, update_data: dict
    ) -> Optional[Category]:
        category = await self.get_by_id_and_user(category_id, user_id)
        if not category:
            return None

        for key, value in update_data.items():
            setattr(category, key, value)

        await self.session.commit()
        await self.session.refresh(category)
        return category

    async def delete_category(self, category_id: UUID, user_id: UUID) -> bool:
        category = await self.get_by_id_and_user(category_id, user_id)
        if not category:
            return False

        await self.session.delete(category)
        await self.session.commit()
        return True
