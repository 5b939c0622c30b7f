"""Public category queries."""

from uuid import UUID

from pydantic import BaseModel

from newsroom.domain.category.model.category import Category
from newsroom.domain.category.model.value import CategoryId
from newsroom.domain.category.service.category import CategoryService
from newsroom.domain.shared.authorization.gate import public
from newsroom.domain.shared.error import ValidationError
from newsroom.domain.shared.query import Query, QueryHandler
from newsroom.domain.shared.query import Result as QueryResult


class CategoryDTO(BaseModel):
    id: str
    name_uz: str
    name_ru: str | None
    slug: str

    @classmethod
    def from_category(cls, category: Category) -> "CategoryDTO":
        return cls(
            id=str(category.id),
            name_uz=category.name_uz,
            name_ru=category.name_ru,
            slug=category.slug,
        )


class CategoryResult(QueryResult):
    category: CategoryDTO


class GetCategory(Query):
    category_id: UUID | None = None
    slug: str | None = None


class GetCategoryHandler(QueryHandler[GetCategory, CategoryResult]):
    __auth__ = public()
    category_service: CategoryService

    async def run(self, query: GetCategory) -> CategoryResult:
        if query.slug is not None:
            category = await self.category_service.get_by_slug(query.slug)
        elif query.category_id is not None:
            category = await self.category_service.get(CategoryId(query.category_id))
        else:
            raise ValidationError("Either category_id or slug is required")
        return CategoryResult(category=CategoryDTO.from_category(category))


class ListCategories(Query): ...


class ListCategoriesResult(QueryResult):
    categories: list[CategoryDTO]


class ListCategoriesHandler(QueryHandler[ListCategories, ListCategoriesResult]):
    __auth__ = public()
    category_service: CategoryService

    async def run(self, query: ListCategories) -> ListCategoriesResult:
        categories = await self.category_service.list()
        return ListCategoriesResult(categories=[CategoryDTO.from_category(c) for c in categories])
