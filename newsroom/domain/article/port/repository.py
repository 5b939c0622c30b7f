"""Repository port for articles."""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol

from newsroom.domain.article.model.article import Article
from newsroom.domain.article.model.value import ArticleId
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.category.model.value import CategoryId
from newsroom.domain.newspaper.model.value import NewspaperId
from newsroom.domain.shared.port import Port


@dataclass(frozen=True)
class ArticleFilter:
    """Equality filters for listing articles. None means unfiltered."""

    category_id: CategoryId | None = None
    author_id: UserId | None = None
    newspaper_id: NewspaperId | None = None
    is_published: bool | None = None


class ArticleRepository(Port, Protocol):
    @abstractmethod
    async def get(self, article_id: ArticleId) -> Article | None: ...

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Article | None: ...

    @abstractmethod
    async def list(self, filters: ArticleFilter) -> list[Article]:
        """Matching articles, newest first."""
        ...

    @abstractmethod
    async def save(self, article: Article) -> None: ...

    @abstractmethod
    async def update(self, article: Article) -> None: ...

    @abstractmethod
    async def delete(self, article_id: ArticleId) -> bool:
        """Delete an article and its comments. Returns False if no such article."""
        ...

    @abstractmethod
    async def increment_view_count(self, article_id: ArticleId) -> None:
        """Atomically add one to view_count."""
        ...
