"""Repository port for comments."""

from abc import abstractmethod
from typing import Protocol

from newsroom.domain.article.model.value import ArticleId
from newsroom.domain.comment.model.comment import Comment
from newsroom.domain.comment.model.value import CommentId
from newsroom.domain.shared.port import Port


class CommentRepository(Port, Protocol):
    @abstractmethod
    async def get(self, comment_id: CommentId) -> Comment | None: ...

    @abstractmethod
    async def list(self, article_id: ArticleId | None = None) -> list[Comment]:
        """Comments, newest first, optionally for one article."""
        ...

    @abstractmethod
    async def save(self, comment: Comment) -> None: ...

    @abstractmethod
    async def update(self, comment: Comment) -> None: ...

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool: ...
