"""Repository port for newspaper issues."""

from abc import abstractmethod
from datetime import date
from typing import Protocol

from newsroom.domain.newspaper.model.newspaper import Newspaper
from newsroom.domain.newspaper.model.value import NewspaperId
from newsroom.domain.shared.port import Port


class NewspaperRepository(Port, Protocol):
    @abstractmethod
    async def get(self, newspaper_id: NewspaperId) -> Newspaper | None: ...

    @abstractmethod
    async def list(
        self, from_date: date | None = None, to_date: date | None = None
    ) -> list[Newspaper]:
        """Issues dated within the inclusive range, latest issue date first."""
        ...

    @abstractmethod
    async def save(self, newspaper: Newspaper) -> None: ...

    @abstractmethod
    async def update(self, newspaper: Newspaper) -> None: ...

    @abstractmethod
    async def delete(self, newspaper_id: NewspaperId) -> bool: ...
