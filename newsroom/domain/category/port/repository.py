"""Repository port for categories."""

from abc import abstractmethod
from typing import Protocol

from newsroom.domain.category.model.category import Category
from newsroom.domain.category.model.value import CategoryId
from newsroom.domain.shared.port import Port


class CategoryRepository(Port, Protocol):
    @abstractmethod
    async def get(self, category_id: CategoryId) -> Category | None: ...

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Category | None: ...

    @abstractmethod
    async def list(self) -> list[Category]: ...

    @abstractmethod
    async def save(self, category: Category) -> None:
        """Insert a category. Duplicate slugs raise ConflictError."""
        ...

    @abstractmethod
    async def update(self, category: Category) -> None: ...

    @abstractmethod
    async def delete(self, category_id: CategoryId) -> bool:
        """Delete a category. Raises ConflictError while articles still reference it."""
        ...
