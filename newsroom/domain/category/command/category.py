"""Category write commands (editorial staff)."""

from uuid import UUID

from pydantic import Field

from newsroom.domain.auth.model.identity import Identity
from newsroom.domain.auth.model.role import Role
from newsroom.domain.category.model.value import CategoryId
from newsroom.domain.category.query.category import CategoryDTO
from newsroom.domain.category.service.category import CategoryService
from newsroom.domain.shared.authorization.gate import at_least
from newsroom.domain.shared.command import Command, CommandHandler, Result

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class CategoryResult(Result):
    category: CategoryDTO


class CreateCategory(Command):
    name_uz: str = Field(min_length=1, max_length=255)
    name_ru: str | None = Field(default=None, max_length=255)
    slug: str = Field(min_length=1, max_length=255, pattern=SLUG_PATTERN)


class CreateCategoryHandler(CommandHandler[CreateCategory, CategoryResult]):
    __auth__ = at_least(Role.EDITOR)
    identity: Identity
    category_service: CategoryService

    async def run(self, cmd: CreateCategory) -> CategoryResult:
        category = await self.category_service.create(
            name_uz=cmd.name_uz, name_ru=cmd.name_ru, slug=cmd.slug
        )
        return CategoryResult(category=CategoryDTO.from_category(category))


class UpdateCategory(Command):
    category_id: UUID
    name_uz: str | None = Field(default=None, min_length=1, max_length=255)
    name_ru: str | None = Field(default=None, max_length=255)
    slug: str | None = Field(default=None, min_length=1, max_length=255, pattern=SLUG_PATTERN)


class UpdateCategoryHandler(CommandHandler[UpdateCategory, CategoryResult]):
    __auth__ = at_least(Role.EDITOR)
    identity: Identity
    category_service: CategoryService

    async def run(self, cmd: UpdateCategory) -> CategoryResult:
        changes = cmd.model_dump(exclude_unset=True, exclude={"category_id"})
        category = await self.category_service.update(CategoryId(cmd.category_id), changes)
        return CategoryResult(category=CategoryDTO.from_category(category))


class DeleteCategory(Command):
    category_id: UUID


class DeleteCategoryResult(Result):
    deleted: bool = True


class DeleteCategoryHandler(CommandHandler[DeleteCategory, DeleteCategoryResult]):
    __auth__ = at_least(Role.ADMIN)
    identity: Identity
    category_service: CategoryService

    async def run(self, cmd: DeleteCategory) -> DeleteCategoryResult:
        await self.category_service.delete(CategoryId(cmd.category_id))
        return DeleteCategoryResult()
