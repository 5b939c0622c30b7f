"""DI provider for the advertisement domain."""

from dishka import Provider, Scope, provide

from newsroom.domain.advertisement.command.advertisement import (
    CreateAdvertisementHandler,
    DeleteAdvertisementHandler,
    UpdateAdvertisementHandler,
)
from newsroom.domain.advertisement.port.repository import AdvertisementRepository
from newsroom.domain.advertisement.query.advertisement import (
    GetAdvertisementHandler,
    ListAdvertisementsHandler,
)
from newsroom.domain.advertisement.service.advertisement import AdvertisementService


class AdvertisementProvider(Provider):
    create_advertisement_handler = provide(CreateAdvertisementHandler, scope=Scope.REQUEST)
    update_advertisement_handler = provide(UpdateAdvertisementHandler, scope=Scope.REQUEST)
    delete_advertisement_handler = provide(DeleteAdvertisementHandler, scope=Scope.REQUEST)
    get_advertisement_handler = provide(GetAdvertisementHandler, scope=Scope.REQUEST)
    list_advertisements_handler = provide(ListAdvertisementsHandler, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def get_advertisement_service(
        self, advertisement_repo: AdvertisementRepository
    ) -> AdvertisementService:
        return AdvertisementService(_advertisement_repo=advertisement_repo)
