"""Article service: CRUD with ownership-based mutation rules."""

import logging
from typing import Any

from newsroom.domain.article.model.article import Article
from newsroom.domain.article.model.value import ArticleId
from newsroom.domain.article.port.repository import ArticleFilter, ArticleRepository
from newsroom.domain.auth.model.principal import Principal
from newsroom.domain.auth.port.repository import UserRepository
from newsroom.domain.auth.service.authorization import AuthorizationGate
from newsroom.domain.category.model.value import CategoryId
from newsroom.domain.category.port.repository import CategoryRepository
from newsroom.domain.newspaper.model.value import NewspaperId
from newsroom.domain.newspaper.port.repository import NewspaperRepository
from newsroom.domain.shared.authorization.resource import ARTICLE_POLICY, Operation
from newsroom.domain.shared.error import ConflictError, NotFoundError
from newsroom.domain.shared.service import Service

logger = logging.getLogger(__name__)


class ArticleService(Service):
    """Articles are written by reporters and above.

    The author may always edit or delete their own article; editors and
    administrators may edit or delete anyone's. Reads are public and each
    single-article read counts as a view.
    """

    _article_repo: ArticleRepository
    _category_repo: CategoryRepository
    _newspaper_repo: NewspaperRepository
    _user_repo: UserRepository
    _gate: AuthorizationGate

    async def _get_or_404(self, article_id: ArticleId) -> Article:
        article = await self._article_repo.get(article_id)
        if article is None:
            raise NotFoundError(f"Article not found: {article_id}")
        return article

    async def _check_references(
        self,
        category_id: CategoryId | None,
        newspaper_id: NewspaperId | None,
    ) -> None:
        if category_id is not None and await self._category_repo.get(category_id) is None:
            raise NotFoundError(f"Category not found: {category_id}")
        if newspaper_id is not None and await self._newspaper_repo.get(newspaper_id) is None:
            raise NotFoundError(f"Newspaper not found: {newspaper_id}")

    async def _ensure_slug_free(self, slug: str, owner: ArticleId | None = None) -> None:
        existing = await self._article_repo.get_by_slug(slug)
        if existing is not None and existing.id != owner:
            raise ConflictError(f"Article slug already in use: {slug}")

    async def create(self, principal: Principal, fields: dict[str, Any]) -> Article:
        if await self._user_repo.get(principal.user_id) is None:
            raise NotFoundError(f"Author not found: {principal.user_id}")
        await self._check_references(fields["category_id"], fields.get("newspaper_id"))
        await self._ensure_slug_free(fields["slug"])

        article = Article.create(author_id=principal.user_id, **fields)
        await self._article_repo.save(article)
        logger.info("Article created: id=%s, author_id=%s", article.id, principal.user_id)
        return article

    async def get(self, article_id: ArticleId) -> Article:
        article = await self._get_or_404(article_id)
        await self._article_repo.increment_view_count(article.id)
        article.view_count += 1
        return article

    async def get_by_slug(self, slug: str) -> Article:
        article = await self._article_repo.get_by_slug(slug)
        if article is None:
            raise NotFoundError(f"Article not found: {slug}")
        await self._article_repo.increment_view_count(article.id)
        article.view_count += 1
        return article

    async def list(self, filters: ArticleFilter) -> list[Article]:
        return await self._article_repo.list(filters)

    async def update(
        self,
        principal: Principal,
        article_id: ArticleId,
        changes: dict[str, Any],
    ) -> Article:
        article = await self._get_or_404(article_id)
        self._gate.authorize_mutation(principal, article, Operation.UPDATE, ARTICLE_POLICY)

        await self._check_references(changes.get("category_id"), changes.get("newspaper_id"))
        if "slug" in changes and changes["slug"] != article.slug:
            await self._ensure_slug_free(changes["slug"], owner=article.id)

        article.update(changes)
        await self._article_repo.update(article)
        return article

    async def delete(self, principal: Principal, article_id: ArticleId) -> None:
        article = await self._get_or_404(article_id)
        self._gate.authorize_mutation(principal, article, Operation.DELETE, ARTICLE_POLICY)
        await self._article_repo.delete(article.id)
        logger.info("Article deleted: id=%s, by=%s", article.id, principal.user_id)
