"""Article aggregate."""

from datetime import UTC, datetime
from typing import Any

from newsroom.domain.article.model.value import ArticleId
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.category.model.value import CategoryId
from newsroom.domain.newspaper.model.value import NewspaperId
from newsroom.domain.shared.model.aggregate import Aggregate

# Fields an update may touch. author_id, view_count and timestamps are not among them.
EDITABLE_FIELDS = frozenset(
    {
        "title_uz",
        "title_ru",
        "content_uz",
        "content_ru",
        "slug",
        "thumbnail",
        "is_published",
        "category_id",
        "newspaper_id",
    }
)


class Article(Aggregate):
    """A bilingual news article.

    Invariants:
    - `author_id` is fixed at creation and is the article's owner
    - `slug` is unique across all articles
    """

    id: ArticleId
    title_uz: str
    title_ru: str | None = None
    content_uz: str
    content_ru: str | None = None
    slug: str
    thumbnail: str | None = None
    view_count: int = 0
    is_published: bool = False
    category_id: CategoryId
    author_id: UserId
    newspaper_id: NewspaperId | None = None
    created_at: datetime
    updated_at: datetime

    @property
    def owner_id(self) -> UserId:
        return self.author_id

    @classmethod
    def create(cls, author_id: UserId, **fields: Any) -> "Article":
        now = datetime.now(UTC)
        return cls(
            id=ArticleId.generate(),
            author_id=author_id,
            created_at=now,
            updated_at=now,
            **fields,
        )

    def update(self, changes: dict[str, Any]) -> None:
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Not editable: {', '.join(sorted(unknown))}")
        for field, value in changes.items():
            setattr(self, field, value)
        self.updated_at = datetime.now(UTC)
