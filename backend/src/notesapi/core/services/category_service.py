"""Category service implementation."""

from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NotFoundError
from ..repositories.category_repository import CategoryRepository
from ..schemas.categories import CategoryCreate, CategoryResponse
from .interfaces import ICategoryService


def category_not_found() -> NotFoundError:
    return NotFoundError("Category not found", code="CATEGORY_NOT_FOUND")


class CategoryService(ICategoryService):
    def __init__(self, session: AsyncSession):
        self.session = session
        self.category_repo = CategoryRepository(session)

    async def list_categories(self, user_id: UUID) -> List[CategoryResponse]:
        categories = await self.category_repo.list_user_categories(user_id)
        return [CategoryResponse.model_validate(c) for c in categories]

    async def create_category(self, user_id: UUID, request: CategoryCreate) -> CategoryResponse:
        category = await self.category_repo.create_category(
            {"user_id": user_id, "name": request.name, "color": request.color}
        )
        return CategoryResponse.model_validate(category)

    async def update_category(
        self, category_id: UUID, user_id: UUID, request: CategoryCreate
    ) -> CategoryResponse:
        category = await self.category_repo.update_category(
            category_id, user_id, {"name": request.name, "color": request.color}
        )
        if not category:
            raise category_not_found()
        return CategoryResponse.model_validate(category)

    async def delete_category(self, category_id: UUID, user_id: UUID) -> None:
        if not await self.category_repo.delete_category(category_id, user_id):
            raise category_not_found()
