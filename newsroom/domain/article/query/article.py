"""Public article queries."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from newsroom.domain.article.model.article import Article
from newsroom.domain.article.model.value import ArticleId
from newsroom.domain.article.port.repository import ArticleFilter
from newsroom.domain.article.service.article import ArticleService
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.category.model.value import CategoryId
from newsroom.domain.newspaper.model.value import NewspaperId
from newsroom.domain.shared.authorization.gate import public
from newsroom.domain.shared.error import ValidationError
from newsroom.domain.shared.query import Query, QueryHandler
from newsroom.domain.shared.query import Result as QueryResult


class ArticleDTO(BaseModel):
    id: str
    title_uz: str
    title_ru: str | None
    content_uz: str
    content_ru: str | None
    slug: str
    thumbnail: str | None
    view_count: int
    is_published: bool
    category_id: str
    author_id: str
    newspaper_id: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_article(cls, article: Article) -> "ArticleDTO":
        return cls(
            id=str(article.id),
            title_uz=article.title_uz,
            title_ru=article.title_ru,
            content_uz=article.content_uz,
            content_ru=article.content_ru,
            slug=article.slug,
            thumbnail=article.thumbnail,
            view_count=article.view_count,
            is_published=article.is_published,
            category_id=str(article.category_id),
            author_id=str(article.author_id),
            newspaper_id=str(article.newspaper_id) if article.newspaper_id else None,
            created_at=article.created_at,
            updated_at=article.updated_at,
        )


class ArticleResult(QueryResult):
    article: ArticleDTO


class GetArticle(Query):
    article_id: UUID | None = None
    slug: str | None = None


class GetArticleHandler(QueryHandler[GetArticle, ArticleResult]):
    __auth__ = public()
    article_service: ArticleService

    async def run(self, query: GetArticle) -> ArticleResult:
        if query.slug is not None:
            article = await self.article_service.get_by_slug(query.slug)
        elif query.article_id is not None:
            article = await self.article_service.get(ArticleId(query.article_id))
        else:
            raise ValidationError("Either article_id or slug is required")
        return ArticleResult(article=ArticleDTO.from_article(article))


class ListArticles(Query):
    category_id: UUID | None = None
    author_id: UUID | None = None
    newspaper_id: UUID | None = None
    is_published: bool | None = None


class ListArticlesResult(QueryResult):
    articles: list[ArticleDTO]


class ListArticlesHandler(QueryHandler[ListArticles, ListArticlesResult]):
    __auth__ = public()
    article_service: ArticleService

    async def run(self, query: ListArticles) -> ListArticlesResult:
        filters = ArticleFilter(
            category_id=CategoryId(query.category_id) if query.category_id else None,
            author_id=UserId(query.author_id) if query.author_id else None,
            newspaper_id=NewspaperId(query.newspaper_id) if query.newspaper_id else None,
            is_published=query.is_published,
        )
        articles = await self.article_service.list(filters)
        return ListArticlesResult(articles=[ArticleDTO.from_article(a) for a in articles])
