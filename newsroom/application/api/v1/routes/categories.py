"""Category routes. Reads are public; EDITOR writes, ADMIN deletes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from newsroom.domain.category.command.category import (
    SLUG_PATTERN,
    CreateCategory,
    CreateCategoryHandler,
    DeleteCategory,
    DeleteCategoryHandler,
    UpdateCategory,
    UpdateCategoryHandler,
)
from newsroom.domain.category.query.category import (
    CategoryDTO,
    GetCategory,
    GetCategoryHandler,
    ListCategories,
    ListCategoriesHandler,
)

router = APIRouter(prefix="/categories", tags=["Categories"], route_class=DishkaRoute)


class UpdateCategoryRequest(BaseModel):
    name_uz: str | None = Field(default=None, min_length=1, max_length=255)
    name_ru: str | None = Field(default=None, max_length=255)
    slug: str | None = Field(default=None, min_length=1, max_length=255, pattern=SLUG_PATTERN)


class CategoryListResponse(BaseModel):
    categories: list[CategoryDTO]


@router.post("", response_model=CategoryDTO, status_code=201)
async def create_category(
    body: CreateCategory, handler: FromDishka[CreateCategoryHandler]
) -> CategoryDTO:
    result = await handler.run(body)
    return result.category


@router.get("", response_model=CategoryListResponse)
async def list_categories(handler: FromDishka[ListCategoriesHandler]) -> CategoryListResponse:
    result = await handler.run(ListCategories())
    return CategoryListResponse(categories=result.categories)


@router.get("/slug/{slug}", response_model=CategoryDTO)
async def get_category_by_slug(
    slug: str, handler: FromDishka[GetCategoryHandler]
) -> CategoryDTO:
    result = await handler.run(GetCategory(slug=slug))
    return result.category


@router.get("/{category_id}", response_model=CategoryDTO)
async def get_category(
    category_id: UUID, handler: FromDishka[GetCategoryHandler]
) -> CategoryDTO:
    result = await handler.run(GetCategory(category_id=category_id))
    return result.category


@router.patch("/{category_id}", response_model=CategoryDTO)
async def update_category(
    category_id: UUID,
    body: UpdateCategoryRequest,
    handler: FromDishka[UpdateCategoryHandler],
) -> CategoryDTO:
    result = await handler.run(
        UpdateCategory(category_id=category_id, **body.model_dump(exclude_unset=True))
    )
    return result.category


@router.delete("/{category_id}", status_code=204)
async def delete_category(
    category_id: UUID, handler: FromDishka[DeleteCategoryHandler]
) -> Response:
    await handler.run(DeleteCategory(category_id=category_id))
    return Response(status_code=204)
