"""Unit tests for CategoryService (src/notesapi/core/services/category_service.py)."""

import uuid

import pytest

from notesapi.core.exceptions import NotFoundError
from notesapi.core.schemas.categories import CategoryCreate
from notesapi.core.services.category_service import CategoryService


@pytest.mark.asyncio
async def test_category_lifecycle(test_session, test_user):
    svc = CategoryService(test_session)

    created = await svc.create_category(test_user.id, CategoryCreate(name="Work", color="#336699"))
    updated = await svc.update_category(created.id, test_user.id, CategoryCreate(name="Job"))

    assert updated.name == "Job"
    assert updated.color is None
    assert [c.id for c in await svc.list_categories(test_user.id)] == [created.id]

    await svc.delete_category(created.id, test_user.id)
    assert await svc.list_categories(test_user.id) == []


@pytest.mark.asyncio
async def test_categories_are_owner_scoped(test_session, test_user, other_user):
    svc = CategoryService(test_session)
    created = await svc.create_category(test_user.id, CategoryCreate(name="Work"))

    assert await svc.list_categories(other_user.id) == []
    with pytest.raises(NotFoundError) as exc:
        await svc.delete_category(created.id, other_user.id)
    assert exc.value.code == "CATEGORY_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_missing_category(test_session, test_user):
    with pytest.raises(NotFoundError):
        await CategoryService(test_session).update_category(
            uuid.uuid4(), test_user.id, CategoryCreate(name="x")
        )
