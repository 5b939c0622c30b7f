"""Category aggregate."""

from typing import Any

from newsroom.domain.category.model.value import CategoryId
from newsroom.domain.shared.model.aggregate import Aggregate


class Category(Aggregate):
    """An article section, named in Uzbek and optionally Russian."""

    id: CategoryId
    name_uz: str
    name_ru: str | None = None
    slug: str

    @classmethod
    def create(cls, name_uz: str, slug: str, name_ru: str | None = None) -> "Category":
        return cls(id=CategoryId.generate(), name_uz=name_uz, name_ru=name_ru, slug=slug)

    def update(self, changes: dict[str, Any]) -> None:
        for field, value in changes.items():
            setattr(self, field, value)
