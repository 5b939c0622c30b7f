"""Public advertisement queries."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from newsroom.domain.advertisement.model.advertisement import Advertisement
from newsroom.domain.advertisement.model.value import AdvertisementId
from newsroom.domain.advertisement.service.advertisement import AdvertisementService
from newsroom.domain.shared.authorization.gate import public
from newsroom.domain.shared.query import Query, QueryHandler
from newsroom.domain.shared.query import Result as QueryResult


class AdvertisementDTO(BaseModel):
    id: str
    title: str
    image_url: str
    link: str | None
    is_active: bool
    expiry_date: datetime | None
    created_at: datetime

    @classmethod
    def from_advertisement(cls, ad: Advertisement) -> "AdvertisementDTO":
        return cls(
            id=str(ad.id),
            title=ad.title,
            image_url=ad.image_url,
            link=ad.link,
            is_active=ad.is_active,
            expiry_date=ad.expiry_date,
            created_at=ad.created_at,
        )


class AdvertisementResult(QueryResult):
    advertisement: AdvertisementDTO


class GetAdvertisement(Query):
    advertisement_id: UUID


class GetAdvertisementHandler(QueryHandler[GetAdvertisement, AdvertisementResult]):
    __auth__ = public()
    advertisement_service: AdvertisementService

    async def run(self, query: GetAdvertisement) -> AdvertisementResult:
        ad = await self.advertisement_service.get(AdvertisementId(query.advertisement_id))
        return AdvertisementResult(advertisement=AdvertisementDTO.from_advertisement(ad))


class ListAdvertisements(Query):
    """Expired ads are never listed; inactive ones only when asked for."""

    is_active: bool = True


class ListAdvertisementsResult(QueryResult):
    advertisements: list[AdvertisementDTO]


class ListAdvertisementsHandler(QueryHandler[ListAdvertisements, ListAdvertisementsResult]):
    __auth__ = public()
    advertisement_service: AdvertisementService

    async def run(self, query: ListAdvertisements) -> ListAdvertisementsResult:
        ads = await self.advertisement_service.list(is_active=query.is_active)
        return ListAdvertisementsResult(
            advertisements=[AdvertisementDTO.from_advertisement(a) for a in ads]
        )
