from dishka import AsyncContainer, make_async_container

from newsroom.config import Config
from newsroom.domain.advertisement.util.di import AdvertisementProvider
from newsroom.domain.article.util.di import ArticleProvider
from newsroom.domain.auth.util.di import AuthProvider
from newsroom.domain.category.util.di import CategoryProvider
from newsroom.domain.comment.util.di import CommentProvider
from newsroom.domain.newspaper.util.di import NewspaperProvider
from newsroom.infrastructure.persistence import PersistenceProvider


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        PersistenceProvider(),
        AuthProvider(),
        CategoryProvider(),
        NewspaperProvider(),
        ArticleProvider(),
        CommentProvider(),
        AdvertisementProvider(),
        context={Config: config},
    )
