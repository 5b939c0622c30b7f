"""SQL repository implementation for comments."""

from uuid import UUID

from sqlalchemy import delete, insert, select, update

from newsroom.domain.article.model.value import ArticleId
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.comment.model.comment import Comment
from newsroom.domain.comment.model.value import CommentId
from newsroom.domain.comment.port.repository import CommentRepository
from newsroom.infrastructure.persistence.repository.base import SqlRepository
from newsroom.infrastructure.persistence.tables import comments_table


def _row_to_comment(row: dict) -> Comment:
    return Comment(
        id=CommentId(UUID(row["id"])),
        text=row["text"],
        author_id=UserId(UUID(row["author_id"])),
        article_id=ArticleId(UUID(row["article_id"])),
        created_at=row["created_at"],
    )


def _comment_to_dict(comment: Comment) -> dict:
    return {
        "id": str(comment.id),
        "text": comment.text,
        "author_id": str(comment.author_id),
        "article_id": str(comment.article_id),
        "created_at": comment.created_at,
    }


class SqlCommentRepository(SqlRepository, CommentRepository):
    async def get(self, comment_id: CommentId) -> Comment | None:
        stmt = select(comments_table).where(comments_table.c.id == str(comment_id))
        result = await self._execute(stmt)
        row = result.mappings().first()
        return _row_to_comment(dict(row)) if row else None

    async def list(self, article_id: ArticleId | None = None) -> list[Comment]:
        stmt = select(comments_table).order_by(comments_table.c.created_at.desc())
        if article_id is not None:
            stmt = stmt.where(comments_table.c.article_id == str(article_id))
        result = await self._execute(stmt)
        return [_row_to_comment(dict(row)) for row in result.mappings().all()]

    async def save(self, comment: Comment) -> None:
        await self._write(insert(comments_table).values(**_comment_to_dict(comment)))

    async def update(self, comment: Comment) -> None:
        await self._write(
            update(comments_table)
            .where(comments_table.c.id == str(comment.id))
            .values(text=comment.text)
        )

    async def delete(self, comment_id: CommentId) -> bool:
        result = await self._write(
            delete(comments_table).where(comments_table.c.id == str(comment_id))
        )
        return result.rowcount > 0
