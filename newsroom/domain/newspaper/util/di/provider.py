"""DI provider for the newspaper domain."""

from dishka import Provider, Scope, provide

from newsroom.domain.newspaper.command.newspaper import (
    CreateNewspaperHandler,
    DeleteNewspaperHandler,
    UpdateNewspaperHandler,
)
from newsroom.domain.newspaper.port.repository import NewspaperRepository
from newsroom.domain.newspaper.query.newspaper import GetNewspaperHandler, ListNewspapersHandler
from newsroom.domain.newspaper.service.newspaper import NewspaperService


class NewspaperProvider(Provider):
    create_newspaper_handler = provide(CreateNewspaperHandler, scope=Scope.REQUEST)
    update_newspaper_handler = provide(UpdateNewspaperHandler, scope=Scope.REQUEST)
    delete_newspaper_handler = provide(DeleteNewspaperHandler, scope=Scope.REQUEST)
    get_newspaper_handler = provide(GetNewspaperHandler, scope=Scope.REQUEST)
    list_newspapers_handler = provide(ListNewspapersHandler, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def get_newspaper_service(self, newspaper_repo: NewspaperRepository) -> NewspaperService:
        return NewspaperService(_newspaper_repo=newspaper_repo)
