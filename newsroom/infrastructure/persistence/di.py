from typing import AsyncIterable

from dishka import Provider, Scope, from_context, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from newsroom.config import Config
from newsroom.domain.advertisement.port.repository import AdvertisementRepository
from newsroom.domain.article.port.repository import ArticleRepository
from newsroom.domain.auth.port.repository import UserRepository
from newsroom.domain.category.port.repository import CategoryRepository
from newsroom.domain.comment.port.repository import CommentRepository
from newsroom.domain.newspaper.port.repository import NewspaperRepository
from newsroom.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from newsroom.infrastructure.persistence.repository.advertisement import (
    SqlAdvertisementRepository,
)
from newsroom.infrastructure.persistence.repository.article import SqlArticleRepository
from newsroom.infrastructure.persistence.repository.category import SqlCategoryRepository
from newsroom.infrastructure.persistence.repository.comment import SqlCommentRepository
from newsroom.infrastructure.persistence.repository.newspaper import SqlNewspaperRepository
from newsroom.infrastructure.persistence.repository.user import SqlUserRepository


class PersistenceProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)

    # APP-scoped factories
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config.database)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # One session per request, committed when the request scope closes
    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    # Request-scoped repositories
    user_repo = provide(SqlUserRepository, scope=Scope.REQUEST, provides=UserRepository)
    category_repo = provide(SqlCategoryRepository, scope=Scope.REQUEST, provides=CategoryRepository)
    newspaper_repo = provide(
        SqlNewspaperRepository, scope=Scope.REQUEST, provides=NewspaperRepository
    )
    article_repo = provide(SqlArticleRepository, scope=Scope.REQUEST, provides=ArticleRepository)
    comment_repo = provide(SqlCommentRepository, scope=Scope.REQUEST, provides=CommentRepository)
    advertisement_repo = provide(
        SqlAdvertisementRepository, scope=Scope.REQUEST, provides=AdvertisementRepository
    )
