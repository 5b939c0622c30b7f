"""DI provider for the article domain."""

from dishka import Provider, Scope, provide

from newsroom.domain.article.command.article import (
    CreateArticleHandler,
    DeleteArticleHandler,
    UpdateArticleHandler,
)
from newsroom.domain.article.port.repository import ArticleRepository
from newsroom.domain.article.query.article import GetArticleHandler, ListArticlesHandler
from newsroom.domain.article.service.article import ArticleService
from newsroom.domain.auth.port.repository import UserRepository
from newsroom.domain.auth.service.authorization import AuthorizationGate
from newsroom.domain.category.port.repository import CategoryRepository
from newsroom.domain.newspaper.port.repository import NewspaperRepository


class ArticleProvider(Provider):
    create_article_handler = provide(CreateArticleHandler, scope=Scope.REQUEST)
    update_article_handler = provide(UpdateArticleHandler, scope=Scope.REQUEST)
    delete_article_handler = provide(DeleteArticleHandler, scope=Scope.REQUEST)
    get_article_handler = provide(GetArticleHandler, scope=Scope.REQUEST)
    list_articles_handler = provide(ListArticlesHandler, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def get_article_service(
        self,
        article_repo: ArticleRepository,
        category_repo: CategoryRepository,
        newspaper_repo: NewspaperRepository,
        user_repo: UserRepository,
        gate: AuthorizationGate,
    ) -> ArticleService:
        return ArticleService(
            _article_repo=article_repo,
            _category_repo=category_repo,
            _newspaper_repo=newspaper_repo,
            _user_repo=user_repo,
            _gate=gate,
        )
