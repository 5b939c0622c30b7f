"""Comment write commands (any authenticated user, subject to ownership)."""

from dataclasses import replace
from uuid import UUID

from pydantic import Field

from newsroom.domain.article.model.value import ArticleId
from newsroom.domain.auth.model.identity import Identity
from newsroom.domain.auth.model.principal import Principal
from newsroom.domain.auth.model.role import Role
from newsroom.domain.comment.model.value import CommentId
from newsroom.domain.comment.query.comment import CommentDTO
from newsroom.domain.comment.service.comment import CommentService
from newsroom.domain.shared.authorization.gate import at_least
from newsroom.domain.shared.command import Command, CommandHandler, Result


class CommentResult(Result):
    comment: CommentDTO


class CreateComment(Command):
    article_id: UUID
    text: str = Field(min_length=1, max_length=5000)


class CreateCommentHandler(CommandHandler[CreateComment, CommentResult]):
    __auth__ = at_least(Role.USER)
    identity: Identity
    comment_service: CommentService

    async def run(self, cmd: CreateComment) -> CommentResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate
        comment = await self.comment_service.create(
            self.identity, ArticleId(cmd.article_id), cmd.text
        )
        return CommentResult(comment=CommentDTO.from_comment(comment))


class UpdateComment(Command):
    comment_id: UUID
    text: str = Field(min_length=1, max_length=5000)


class UpdateCommentHandler(CommandHandler[UpdateComment, CommentResult]):
    __auth__ = at_least(Role.USER)
    identity: Identity
    comment_service: CommentService

    async def run(self, cmd: UpdateComment) -> CommentResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate
        comment = await self.comment_service.update(
            self.identity, CommentId(cmd.comment_id), cmd.text
        )
        return CommentResult(comment=CommentDTO.from_comment(comment))


class DeleteComment(Command):
    comment_id: UUID
    own_only: bool = False  # evaluate the caller as a plain USER: ownership alone decides


class DeleteCommentResult(Result):
    deleted: bool = True


class DeleteCommentHandler(CommandHandler[DeleteComment, DeleteCommentResult]):
    __auth__ = at_least(Role.USER)
    identity: Identity
    comment_service: CommentService

    async def run(self, cmd: DeleteComment) -> DeleteCommentResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate
        actor = replace(self.identity, role=Role.USER) if cmd.own_only else self.identity
        await self.comment_service.delete(actor, CommentId(cmd.comment_id))
        return DeleteCommentResult()
