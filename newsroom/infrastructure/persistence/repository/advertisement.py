"""SQL repository implementation for advertisements."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, insert, or_, select, update

from newsroom.domain.advertisement.model.advertisement import Advertisement
from newsroom.domain.advertisement.model.value import AdvertisementId
from newsroom.domain.advertisement.port.repository import AdvertisementRepository
from newsroom.infrastructure.persistence.repository.base import SqlRepository
from newsroom.infrastructure.persistence.tables import advertisements_table


def _row_to_advertisement(row: dict) -> Advertisement:
    return Advertisement(
        id=AdvertisementId(UUID(row["id"])),
        title=row["title"],
        image_url=row["image_url"],
        link=row["link"],
        is_active=row["is_active"],
        expiry_date=row["expiry_date"],
        created_at=row["created_at"],
    )


def _advertisement_to_dict(ad: Advertisement) -> dict:
    return {
        "id": str(ad.id),
        "title": ad.title,
        "image_url": ad.image_url,
        "link": ad.link,
        "is_active": ad.is_active,
        "expiry_date": ad.expiry_date,
        "created_at": ad.created_at,
    }


class SqlAdvertisementRepository(SqlRepository, AdvertisementRepository):
    async def get(self, advertisement_id: AdvertisementId) -> Advertisement | None:
        stmt = select(advertisements_table).where(
            advertisements_table.c.id == str(advertisement_id)
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return _row_to_advertisement(dict(row)) if row else None

    async def list(self, is_active: bool = True) -> list[Advertisement]:
        expiry = advertisements_table.c.expiry_date
        stmt = (
            select(advertisements_table)
            .where(advertisements_table.c.is_active == is_active)
            .where(or_(expiry.is_(None), expiry >= datetime.now(UTC)))
            .order_by(advertisements_table.c.created_at.desc())
        )
        result = await self._execute(stmt)
        return [_row_to_advertisement(dict(row)) for row in result.mappings().all()]

    async def save(self, advertisement: Advertisement) -> None:
        await self._write(
            insert(advertisements_table).values(**_advertisement_to_dict(advertisement))
        )

    async def update(self, advertisement: Advertisement) -> None:
        values = _advertisement_to_dict(advertisement)
        del values["id"], values["created_at"]
        await self._write(
            update(advertisements_table)
            .where(advertisements_table.c.id == str(advertisement.id))
            .values(**values)
        )

    async def delete(self, advertisement_id: AdvertisementId) -> bool:
        result = await self._write(
            delete(advertisements_table).where(advertisements_table.c.id == str(advertisement_id))
        )
        return result.rowcount > 0
