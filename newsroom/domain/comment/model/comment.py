"""Comment aggregate."""

from datetime import UTC, datetime

from newsroom.domain.article.model.value import ArticleId
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.comment.model.value import CommentId
from newsroom.domain.shared.model.aggregate import Aggregate


class Comment(Aggregate):
    """A reader comment on an article. `author_id` is fixed at creation."""

    id: CommentId
    text: str
    author_id: UserId
    article_id: ArticleId
    created_at: datetime

    @property
    def owner_id(self) -> UserId:
        return self.author_id

    @classmethod
    def create(cls, author_id: UserId, article_id: ArticleId, text: str) -> "Comment":
        return cls(
            id=CommentId.generate(),
            text=text,
            author_id=author_id,
            article_id=article_id,
            created_at=datetime.now(UTC),
        )

    def edit(self, text: str) -> None:
        self.text = text
