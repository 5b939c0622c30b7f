"""Comment service."""

import logging

from newsroom.domain.article.model.value import ArticleId
from newsroom.domain.article.port.repository import ArticleRepository
from newsroom.domain.auth.model.principal import Principal
from newsroom.domain.auth.port.repository import UserRepository
from newsroom.domain.auth.service.authorization import AuthorizationGate
from newsroom.domain.comment.model.comment import Comment
from newsroom.domain.comment.model.value import CommentId
from newsroom.domain.comment.port.repository import CommentRepository
from newsroom.domain.shared.authorization.resource import COMMENT_POLICY, Operation
from newsroom.domain.shared.error import NotFoundError
from newsroom.domain.shared.service import Service

logger = logging.getLogger(__name__)


class CommentService(Service):
    """Any signed-in user may comment.

    Authors edit and delete their own comments; editors and administrators
    moderate anyone's. The SUPER_ADMIN may delete any comment.
    """

    _comment_repo: CommentRepository
    _article_repo: ArticleRepository
    _user_repo: UserRepository
    _gate: AuthorizationGate

    async def _get_or_404(self, comment_id: CommentId) -> Comment:
        comment = await self._comment_repo.get(comment_id)
        if comment is None:
            raise NotFoundError(f"Comment not found: {comment_id}")
        return comment

    async def create(self, principal: Principal, article_id: ArticleId, text: str) -> Comment:
        # Tokens outlive deleted accounts
        if await self._user_repo.get(principal.user_id) is None:
            raise NotFoundError(f"User not found: {principal.user_id}")
        if await self._article_repo.get(article_id) is None:
            raise NotFoundError(f"Article not found: {article_id}")

        comment = Comment.create(author_id=principal.user_id, article_id=article_id, text=text)
        await self._comment_repo.save(comment)
        logger.info("Comment created: id=%s, article_id=%s", comment.id, article_id)
        return comment

    async def get(self, comment_id: CommentId) -> Comment:
        return await self._get_or_404(comment_id)

    async def list(self, article_id: ArticleId | None = None) -> list[Comment]:
        return await self._comment_repo.list(article_id=article_id)

    async def update(self, principal: Principal, comment_id: CommentId, text: str) -> Comment:
        comment = await self._get_or_404(comment_id)
        self._gate.authorize_mutation(principal, comment, Operation.UPDATE, COMMENT_POLICY)
        comment.edit(text)
        await self._comment_repo.update(comment)
        return comment

    async def delete(self, principal: Principal, comment_id: CommentId) -> None:
        comment = await self._get_or_404(comment_id)
        self._gate.authorize_mutation(principal, comment, Operation.DELETE, COMMENT_POLICY)
        await self._comment_repo.delete(comment.id)
        logger.info("Comment deleted: id=%s, by=%s", comment.id, principal.user_id)
