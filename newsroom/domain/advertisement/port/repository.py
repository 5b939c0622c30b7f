"""Repository port for advertisements."""

from abc import abstractmethod
from typing import Protocol

from newsroom.domain.advertisement.model.advertisement import Advertisement
from newsroom.domain.advertisement.model.value import AdvertisementId
from newsroom.domain.shared.port import Port


class AdvertisementRepository(Port, Protocol):
    @abstractmethod
    async def get(self, advertisement_id: AdvertisementId) -> Advertisement | None: ...

    @abstractmethod
    async def list(self, is_active: bool = True) -> list[Advertisement]:
        """Ads with the given active flag whose expiry date, if any, has not passed."""
        ...

    @abstractmethod
    async def save(self, advertisement: Advertisement) -> None: ...

    @abstractmethod
    async def update(self, advertisement: Advertisement) -> None: ...

    @abstractmethod
    async def delete(self, advertisement_id: AdvertisementId) -> bool: ...
