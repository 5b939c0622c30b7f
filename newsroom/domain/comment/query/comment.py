"""Public comment queries."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from newsroom.domain.article.model.value import ArticleId
from newsroom.domain.comment.model.comment import Comment
from newsroom.domain.comment.model.value import CommentId
from newsroom.domain.comment.service.comment import CommentService
from newsroom.domain.shared.authorization.gate import public
from newsroom.domain.shared.query import Query, QueryHandler
from newsroom.domain.shared.query import Result as QueryResult


class CommentDTO(BaseModel):
    id: str
    text: str
    author_id: str
    article_id: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentDTO":
        return cls(
            id=str(comment.id),
            text=comment.text,
            author_id=str(comment.author_id),
            article_id=str(comment.article_id),
            created_at=comment.created_at,
        )


class CommentResult(QueryResult):
    comment: CommentDTO


class GetComment(Query):
    comment_id: UUID


class GetCommentHandler(QueryHandler[GetComment, CommentResult]):
    __auth__ = public()
    comment_service: CommentService

    async def run(self, query: GetComment) -> CommentResult:
        comment = await self.comment_service.get(CommentId(query.comment_id))
        return CommentResult(comment=CommentDTO.from_comment(comment))


class ListComments(Query):
    article_id: UUID | None = None


class ListCommentsResult(QueryResult):
    comments: list[CommentDTO]


class ListCommentsHandler(QueryHandler[ListComments, ListCommentsResult]):
    __auth__ = public()
    comment_service: CommentService

    async def run(self, query: ListComments) -> ListCommentsResult:
        article_id = ArticleId(query.article_id) if query.article_id else None
        comments = await self.comment_service.list(article_id=article_id)
        return ListCommentsResult(comments=[CommentDTO.from_comment(c) for c in comments])
