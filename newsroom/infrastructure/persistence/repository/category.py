"""SQL repository implementation for categories."""

from uuid import UUID

from sqlalchemy import delete, insert, select, update

from newsroom.domain.category.model.category import Category
from newsroom.domain.category.model.value import CategoryId
from newsroom.domain.category.port.repository import CategoryRepository
from newsroom.infrastructure.persistence.repository.base import SqlRepository
from newsroom.infrastructure.persistence.tables import categories_table


def _row_to_category(row: dict) -> Category:
    return Category(
        id=CategoryId(UUID(row["id"])),
        name_uz=row["name_uz"],
        name_ru=row["name_ru"],
        slug=row["slug"],
    )


def _category_to_dict(category: Category) -> dict:
    return {
        "id": str(category.id),
        "name_uz": category.name_uz,
        "name_ru": category.name_ru,
        "slug": category.slug,
    }


class SqlCategoryRepository(SqlRepository, CategoryRepository):
    async def get(self, category_id: CategoryId) -> Category | None:
        stmt = select(categories_table).where(categories_table.c.id == str(category_id))
        result = await self._execute(stmt)
        row = result.mappings().first()
        return _row_to_category(dict(row)) if row else None

    async def get_by_slug(self, slug: str) -> Category | None:
        stmt = select(categories_table).where(categories_table.c.slug == slug)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return _row_to_category(dict(row)) if row else None

    async def list(self) -> list[Category]:
        result = await self._execute(select(categories_table).order_by(categories_table.c.name_uz))
        return [_row_to_category(dict(row)) for row in result.mappings().all()]

    async def save(self, category: Category) -> None:
        await self._write(
            insert(categories_table).values(**_category_to_dict(category)),
            conflict_message=f"Category slug already in use: {category.slug}",
        )

    async def update(self, category: Category) -> None:
        await self._write(
            update(categories_table)
            .where(categories_table.c.id == str(category.id))
            .values(**_category_to_dict(category)),
            conflict_message=f"Category slug already in use: {category.slug}",
        )

    async def delete(self, category_id: CategoryId) -> bool:
        result = await self._write(
            delete(categories_table).where(categories_table.c.id == str(category_id)),
            reference_message="Category still has articles",
        )
        return result.rowcount > 0
