"""Category CRUD."""

import logging
from typing import Any

from newsroom.domain.category.model.category import Category
from newsroom.domain.category.model.value import CategoryId
from newsroom.domain.category.port.repository import CategoryRepository
from newsroom.domain.shared.error import ConflictError, NotFoundError
from newsroom.domain.shared.service import Service

logger = logging.getLogger(__name__)


class CategoryService(Service):
    _category_repo: CategoryRepository

    async def _ensure_slug_free(self, slug: str, owner: CategoryId | None = None) -> None:
        existing = await self._category_repo.get_by_slug(slug)
        if existing is not None and existing.id != owner:
            raise ConflictError(f"Category slug already in use: {slug}")

    async def create(self, name_uz: str, slug: str, name_ru: str | None = None) -> Category:
        await self._ensure_slug_free(slug)
        category = Category.create(name_uz=name_uz, name_ru=name_ru, slug=slug)
        await self._category_repo.save(category)
        logger.info("Category created: id=%s, slug=%s", category.id, slug)
        return category

    async def get(self, category_id: CategoryId) -> Category:
        category = await self._category_repo.get(category_id)
        if category is None:
            raise NotFoundError(f"Category not found: {category_id}")
        return category

    async def get_by_slug(self, slug: str) -> Category:
        category = await self._category_repo.get_by_slug(slug)
        if category is None:
            raise NotFoundError(f"Category not found: {slug}")
        return category

    async def list(self) -> list[Category]:
        return await self._category_repo.list()

    async def update(self, category_id: CategoryId, changes: dict[str, Any]) -> Category:
        category = await self.get(category_id)
        if "slug" in changes and changes["slug"] != category.slug:
            await self._ensure_slug_free(changes["slug"], owner=category.id)
        category.update(changes)
        await self._category_repo.update(category)
        return category

    async def delete(self, category_id: CategoryId) -> None:
        if not await self._category_repo.delete(category_id):
            raise NotFoundError(f"Category not found: {category_id}")
        logger.info("Category deleted: id=%s", category_id)
