"""Advertisement write commands (administrators)."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from newsroom.domain.advertisement.model.value import AdvertisementId
from newsroom.domain.advertisement.query.advertisement import AdvertisementDTO
from newsroom.domain.advertisement.service.advertisement import AdvertisementService
from newsroom.domain.auth.model.identity import Identity
from newsroom.domain.auth.model.role import Role
from newsroom.domain.shared.authorization.gate import at_least
from newsroom.domain.shared.command import Command, CommandHandler, Result


class AdvertisementResult(Result):
    advertisement: AdvertisementDTO


class CreateAdvertisement(Command):
    title: str = Field(min_length=1, max_length=255)
    image_url: str = Field(min_length=1)
    link: str | None = None
    is_active: bool = True
    expiry_date: datetime | None = None


class CreateAdvertisementHandler(CommandHandler[CreateAdvertisement, AdvertisementResult]):
    __auth__ = at_least(Role.ADMIN)
    identity: Identity
    advertisement_service: AdvertisementService

    async def run(self, cmd: CreateAdvertisement) -> AdvertisementResult:
        ad = await self.advertisement_service.create(**cmd.model_dump())
        return AdvertisementResult(advertisement=AdvertisementDTO.from_advertisement(ad))


class UpdateAdvertisement(Command):
    advertisement_id: UUID
    title: str | None = Field(default=None, min_length=1, max_length=255)
    image_url: str | None = Field(default=None, min_length=1)
    link: str | None = None
    is_active: bool | None = None
    expiry_date: datetime | None = None


class UpdateAdvertisementHandler(CommandHandler[UpdateAdvertisement, AdvertisementResult]):
    __auth__ = at_least(Role.ADMIN)
    identity: Identity
    advertisement_service: AdvertisementService

    async def run(self, cmd: UpdateAdvertisement) -> AdvertisementResult:
        changes = cmd.model_dump(exclude_unset=True, exclude={"advertisement_id"})
        ad = await self.advertisement_service.update(AdvertisementId(cmd.advertisement_id), changes)
        return AdvertisementResult(advertisement=AdvertisementDTO.from_advertisement(ad))


class DeleteAdvertisement(Command):
    advertisement_id: UUID


class DeleteAdvertisementResult(Result):
    deleted: bool = True


class DeleteAdvertisementHandler(CommandHandler[DeleteAdvertisement, DeleteAdvertisementResult]):
    __auth__ = at_least(Role.ADMIN)
    identity: Identity
    advertisement_service: AdvertisementService

    async def run(self, cmd: DeleteAdvertisement) -> DeleteAdvertisementResult:
        await self.advertisement_service.delete(AdvertisementId(cmd.advertisement_id))
        return DeleteAdvertisementResult()
