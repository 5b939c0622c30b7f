"""DI provider for the category domain."""

from dishka import Provider, Scope, provide

from newsroom.domain.category.command.category import (
    CreateCategoryHandler,
    DeleteCategoryHandler,
    UpdateCategoryHandler,
)
from newsroom.domain.category.port.repository import CategoryRepository
from newsroom.domain.category.query.category import GetCategoryHandler, ListCategoriesHandler
from newsroom.domain.category.service.category import CategoryService


class CategoryProvider(Provider):
    create_category_handler = provide(CreateCategoryHandler, scope=Scope.REQUEST)
    update_category_handler = provide(UpdateCategoryHandler, scope=Scope.REQUEST)
    delete_category_handler = provide(DeleteCategoryHandler, scope=Scope.REQUEST)
    get_category_handler = provide(GetCategoryHandler, scope=Scope.REQUEST)
    list_categories_handler = provide(ListCategoriesHandler, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def get_category_service(self, category_repo: CategoryRepository) -> CategoryService:
        return CategoryService(_category_repo=category_repo)
