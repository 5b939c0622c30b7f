"""Advertisement CRUD."""

import logging
from typing import Any

from newsroom.domain.advertisement.model.advertisement import Advertisement
from newsroom.domain.advertisement.model.value import AdvertisementId
from newsroom.domain.advertisement.port.repository import AdvertisementRepository
from newsroom.domain.shared.error import NotFoundError
from newsroom.domain.shared.service import Service

logger = logging.getLogger(__name__)


class AdvertisementService(Service):
    _advertisement_repo: AdvertisementRepository

    async def create(self, **fields: Any) -> Advertisement:
        advertisement = Advertisement.create(**fields)
        await self._advertisement_repo.save(advertisement)
        logger.info("Advertisement created: id=%s", advertisement.id)
        return advertisement

    async def get(self, advertisement_id: AdvertisementId) -> Advertisement:
        advertisement = await self._advertisement_repo.get(advertisement_id)
        if advertisement is None:
            raise NotFoundError(f"Advertisement not found: {advertisement_id}")
        return advertisement

    async def list(self, is_active: bool = True) -> list[Advertisement]:
        return await self._advertisement_repo.list(is_active=is_active)

    async def update(
        self, advertisement_id: AdvertisementId, changes: dict[str, Any]
    ) -> Advertisement:
        advertisement = await self.get(advertisement_id)
        advertisement.update(changes)
        await self._advertisement_repo.update(advertisement)
        return advertisement

    async def delete(self, advertisement_id: AdvertisementId) -> None:
        if not await self._advertisement_repo.delete(advertisement_id):
            raise NotFoundError(f"Advertisement not found: {advertisement_id}")
        logger.info("Advertisement deleted: id=%s", advertisement_id)
