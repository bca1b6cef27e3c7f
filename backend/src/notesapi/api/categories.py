"""Categories API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import NotFoundError
from ..core.schemas.categories import CategoryCreate, CategoryListPayload, CategoryPayload
from ..core.schemas.common import ApiResponse
from ..core.services import CategoryService
from ..database import get_db_session
from ..middleware.auth import RequestContext, require_auth

router = APIRouter(prefix="/categories", tags=["categories"])


def parse_category_id(category_id: str) -> UUID:
    try:
        return UUID(category_id)
    except ValueError as exc:
        raise NotFoundError("Category not found", code="CATEGORY_NOT_FOUND") from exc


@router.get("", response_model=ApiResponse[CategoryListPayload])
async def list_categories(
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
):
    categories = await CategoryService(session).list_categories(context.user_id)
    return ApiResponse(data=CategoryListPayload(categories=categories))


@router.post("", response_model=ApiResponse[CategoryPayload], status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CategoryCreate,
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
):
    category = await CategoryService(session).create_category(context.user_id, request)
    return ApiResponse(message="Category created successfully", data=CategoryPayload(category=category))


@router.put("/{category_id}", response_model=ApiResponse[CategoryPayload])
async def update_category(
    category_id: str,
    request: CategoryCreate,
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
):
    category = await CategoryService(session).update_category(
        parse_category_id(category_id), context.user_id, request
    )
    return ApiResponse(data=CategoryPayload(category=category))


@router.delete("/{category_id}", response_model=ApiResponse[None])
async def delete_category(
    category_id: str,
    context: RequestContext = Depends(require_auth),
    session: AsyncSession = Depends(get_db_session),
):
    await CategoryService(session).delete_category(parse_category_id(category_id), context.user_id)
    return ApiResponse(message="Category deleted successfully")
