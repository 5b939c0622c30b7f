"""DI provider for the comment domain."""

from dishka import Provider, Scope, provide

from newsroom.domain.article.port.repository import ArticleRepository
from newsroom.domain.auth.port.repository import UserRepository
from newsroom.domain.auth.service.authorization import AuthorizationGate
from newsroom.domain.comment.command.comment import (
    CreateCommentHandler,
    DeleteCommentHandler,
    UpdateCommentHandler,
)
from newsroom.domain.comment.port.repository import CommentRepository
from newsroom.domain.comment.query.comment import GetCommentHandler, ListCommentsHandler
from newsroom.domain.comment.service.comment import CommentService


class CommentProvider(Provider):
    create_comment_handler = provide(CreateCommentHandler, scope=Scope.REQUEST)
    update_comment_handler = provide(UpdateCommentHandler, scope=Scope.REQUEST)
    delete_comment_handler = provide(DeleteCommentHandler, scope=Scope.REQUEST)
    get_comment_handler = provide(GetCommentHandler, scope=Scope.REQUEST)
    list_comments_handler = provide(ListCommentsHandler, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def get_comment_service(
        self,
        comment_repo: CommentRepository,
        article_repo: ArticleRepository,
        user_repo: UserRepository,
        gate: AuthorizationGate,
    ) -> CommentService:
        return CommentService(
            _comment_repo=comment_repo,
            _article_repo=article_repo,
            _user_repo=user_repo,
            _gate=gate,
        )
