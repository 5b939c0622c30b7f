"""Newspaper issue CRUD."""

import logging
from datetime import date
from typing import Any

from newsroom.domain.newspaper.model.newspaper import Newspaper
from newsroom.domain.newspaper.model.value import NewspaperId
from newsroom.domain.newspaper.port.repository import NewspaperRepository
from newsroom.domain.shared.error import NotFoundError
from newsroom.domain.shared.service import Service

logger = logging.getLogger(__name__)


class NewspaperService(Service):
    _newspaper_repo: NewspaperRepository

    async def create(
        self,
        title: str,
        issue_date: date,
        pdf_url: str,
        cover_image: str | None = None,
    ) -> Newspaper:
        newspaper = Newspaper.create(
            title=title, issue_date=issue_date, pdf_url=pdf_url, cover_image=cover_image
        )
        await self._newspaper_repo.save(newspaper)
        logger.info("Newspaper created: id=%s, issue_date=%s", newspaper.id, issue_date)
        return newspaper

    async def get(self, newspaper_id: NewspaperId) -> Newspaper:
        newspaper = await self._newspaper_repo.get(newspaper_id)
        if newspaper is None:
            raise NotFoundError(f"Newspaper not found: {newspaper_id}")
        return newspaper

    async def list(
        self, from_date: date | None = None, to_date: date | None = None
    ) -> list[Newspaper]:
        return await self._newspaper_repo.list(from_date=from_date, to_date=to_date)

    async def update(self, newspaper_id: NewspaperId, changes: dict[str, Any]) -> Newspaper:
        newspaper = await self.get(newspaper_id)
        newspaper.update(changes)
        await self._newspaper_repo.update(newspaper)
        return newspaper

    async def delete(self, newspaper_id: NewspaperId) -> None:
        if not await self._newspaper_repo.delete(newspaper_id):
            raise NotFoundError(f"Newspaper not found: {newspaper_id}")
        logger.info("Newspaper deleted: id=%s", newspaper_id)
