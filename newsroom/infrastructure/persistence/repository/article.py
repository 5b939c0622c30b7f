"""SQL repository implementation for articles."""

from uuid import UUID

from sqlalchemy import delete, insert, select, update

from newsroom.domain.article.model.article import Article
from newsroom.domain.article.model.value import ArticleId
from newsroom.domain.article.port.repository import ArticleFilter, ArticleRepository
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.category.model.value import CategoryId
from newsroom.domain.newspaper.model.value import NewspaperId
from newsroom.infrastructure.persistence.repository.base import SqlRepository
from newsroom.infrastructure.persistence.tables import articles_table


def _row_to_article(row: dict) -> Article:
    return Article(
        id=ArticleId(UUID(row["id"])),
        title_uz=row["title_uz"],
        title_ru=row["title_ru"],
        content_uz=row["content_uz"],
        content_ru=row["content_ru"],
        slug=row["slug"],
        thumbnail=row["thumbnail"],
        view_count=row["view_count"],
        is_published=row["is_published"],
        category_id=CategoryId(UUID(row["category_id"])),
        author_id=UserId(UUID(row["author_id"])),
        newspaper_id=NewspaperId(UUID(row["newspaper_id"])) if row["newspaper_id"] else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _article_to_dict(article: Article) -> dict:
    return {
        "id": str(article.id),
        "title_uz": article.title_uz,
        "title_ru": article.title_ru,
        "content_uz": article.content_uz,
        "content_ru": article.content_ru,
        "slug": article.slug,
        "thumbnail": article.thumbnail,
        "view_count": article.view_count,
        "is_published": article.is_published,
        "category_id": str(article.category_id),
        "author_id": str(article.author_id),
        "newspaper_id": str(article.newspaper_id) if article.newspaper_id else None,
        "created_at": article.created_at,
        "updated_at": article.updated_at,
    }


class SqlArticleRepository(SqlRepository, ArticleRepository):
    async def get(self, article_id: ArticleId) -> Article | None:
        stmt = select(articles_table).where(articles_table.c.id == str(article_id))
        result = await self._execute(stmt)
        row = result.mappings().first()
        return _row_to_article(dict(row)) if row else None

    async def get_by_slug(self, slug: str) -> Article | None:
        stmt = select(articles_table).where(articles_table.c.slug == slug)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return _row_to_article(dict(row)) if row else None

    async def list(self, filters: ArticleFilter) -> list[Article]:
        stmt = select(articles_table).order_by(articles_table.c.created_at.desc())
        if filters.category_id is not None:
            stmt = stmt.where(articles_table.c.category_id == str(filters.category_id))
        if filters.author_id is not None:
            stmt = stmt.where(articles_table.c.author_id == str(filters.author_id))
        if filters.newspaper_id is not None:
            stmt = stmt.where(articles_table.c.newspaper_id == str(filters.newspaper_id))
        if filters.is_published is not None:
            stmt = stmt.where(articles_table.c.is_published == filters.is_published)
        result = await self._execute(stmt)
        return [_row_to_article(dict(row)) for row in result.mappings().all()]

    async def save(self, article: Article) -> None:
        await self._write(
            insert(articles_table).values(**_article_to_dict(article)),
            conflict_message=f"Article slug already in use: {article.slug}",
        )

    async def update(self, article: Article) -> None:
        values = _article_to_dict(article)
        # author_id is immutable; view_count only moves through increment_view_count
        for frozen in ("id", "author_id", "view_count", "created_at"):
            del values[frozen]
        await self._write(
            update(articles_table).where(articles_table.c.id == str(article.id)).values(**values),
            conflict_message=f"Article slug already in use: {article.slug}",
        )

    async def delete(self, article_id: ArticleId) -> bool:
        result = await self._write(
            delete(articles_table).where(articles_table.c.id == str(article_id))
        )
        return result.rowcount > 0

    async def increment_view_count(self, article_id: ArticleId) -> None:
        await self._write(
            update(articles_table)
            .where(articles_table.c.id == str(article_id))
            .values(view_count=articles_table.c.view_count + 1)
        )
