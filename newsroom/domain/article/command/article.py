"""Article write commands (reporters and above, subject to ownership)."""

from typing import Any
from uuid import UUID

from pydantic import Field

from newsroom.domain.article.model.value import ArticleId
from newsroom.domain.article.query.article import ArticleDTO
from newsroom.domain.article.service.article import ArticleService
from newsroom.domain.auth.model.identity import Identity
from newsroom.domain.auth.model.principal import Principal
from newsroom.domain.auth.model.role import Role
from newsroom.domain.category.model.value import CategoryId
from newsroom.domain.newspaper.model.value import NewspaperId
from newsroom.domain.shared.authorization.gate import at_least
from newsroom.domain.shared.command import Command, CommandHandler, Result

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


def _to_domain_ids(fields: dict[str, Any]) -> dict[str, Any]:
    if fields.get("category_id") is not None:
        fields["category_id"] = CategoryId(fields["category_id"])
    if fields.get("newspaper_id") is not None:
        fields["newspaper_id"] = NewspaperId(fields["newspaper_id"])
    return fields


class ArticleResult(Result):
    article: ArticleDTO


class CreateArticle(Command):
    title_uz: str = Field(min_length=1, max_length=500)
    title_ru: str | None = Field(default=None, max_length=500)
    content_uz: str = Field(min_length=1)
    content_ru: str | None = None
    slug: str = Field(min_length=1, max_length=255, pattern=SLUG_PATTERN)
    thumbnail: str | None = None
    is_published: bool = False
    category_id: UUID
    newspaper_id: UUID | None = None


class CreateArticleHandler(CommandHandler[CreateArticle, ArticleResult]):
    __auth__ = at_least(Role.REPORTER)
    identity: Identity
    article_service: ArticleService

    async def run(self, cmd: CreateArticle) -> ArticleResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate
        article = await self.article_service.create(
            self.identity, _to_domain_ids(cmd.model_dump())
        )
        return ArticleResult(article=ArticleDTO.from_article(article))


class UpdateArticle(Command):
    article_id: UUID
    title_uz: str | None = Field(default=None, min_length=1, max_length=500)
    title_ru: str | None = Field(default=None, max_length=500)
    content_uz: str | None = Field(default=None, min_length=1)
    content_ru: str | None = None
    slug: str | None = Field(default=None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    thumbnail: str | None = None
    is_published: bool | None = None
    category_id: UUID | None = None
    newspaper_id: UUID | None = None


class UpdateArticleHandler(CommandHandler[UpdateArticle, ArticleResult]):
    __auth__ = at_least(Role.REPORTER)
    identity: Identity
    article_service: ArticleService

    async def run(self, cmd: UpdateArticle) -> ArticleResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate
        changes = _to_domain_ids(cmd.model_dump(exclude_unset=True, exclude={"article_id"}))
        article = await self.article_service.update(
            self.identity, ArticleId(cmd.article_id), changes
        )
        return ArticleResult(article=ArticleDTO.from_article(article))


class DeleteArticle(Command):
    article_id: UUID


class DeleteArticleResult(Result):
    deleted: bool = True


class DeleteArticleHandler(CommandHandler[DeleteArticle, DeleteArticleResult]):
    __auth__ = at_least(Role.REPORTER)
    identity: Identity
    article_service: ArticleService

    async def run(self, cmd: DeleteArticle) -> DeleteArticleResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate
        await self.article_service.delete(self.identity, ArticleId(cmd.article_id))
        return DeleteArticleResult()
