"""SQL repository implementation for newspaper issues."""

from datetime import date
from uuid import UUID

from sqlalchemy import delete, insert, select, update

from newsroom.domain.newspaper.model.newspaper import Newspaper
from newsroom.domain.newspaper.model.value import NewspaperId
from newsroom.domain.newspaper.port.repository import NewspaperRepository
from newsroom.infrastructure.persistence.repository.base import SqlRepository
from newsroom.infrastructure.persistence.tables import newspapers_table


def _row_to_newspaper(row: dict) -> Newspaper:
    return Newspaper(
        id=NewspaperId(UUID(row["id"])),
        title=row["title"],
        issue_date=row["issue_date"],
        pdf_url=row["pdf_url"],
        cover_image=row["cover_image"],
        created_at=row["created_at"],
    )


def _newspaper_to_dict(newspaper: Newspaper) -> dict:
    return {
        "id": str(newspaper.id),
        "title": newspaper.title,
        "issue_date": newspaper.issue_date,
        "pdf_url": newspaper.pdf_url,
        "cover_image": newspaper.cover_image,
        "created_at": newspaper.created_at,
    }


class SqlNewspaperRepository(SqlRepository, NewspaperRepository):
    async def get(self, newspaper_id: NewspaperId) -> Newspaper | None:
        stmt = select(newspapers_table).where(newspapers_table.c.id == str(newspaper_id))
        result = await self._execute(stmt)
        row = result.mappings().first()
        return _row_to_newspaper(dict(row)) if row else None

    async def list(
        self, from_date: date | None = None, to_date: date | None = None
    ) -> list[Newspaper]:
        stmt = select(newspapers_table).order_by(newspapers_table.c.issue_date.desc())
        if from_date is not None:
            stmt = stmt.where(newspapers_table.c.issue_date >= from_date)
        if to_date is not None:
            stmt = stmt.where(newspapers_table.c.issue_date <= to_date)
        result = await self._execute(stmt)
        return [_row_to_newspaper(dict(row)) for row in result.mappings().all()]

    async def save(self, newspaper: Newspaper) -> None:
        await self._write(insert(newspapers_table).values(**_newspaper_to_dict(newspaper)))

    async def update(self, newspaper: Newspaper) -> None:
        values = _newspaper_to_dict(newspaper)
        del values["id"], values["created_at"]
        await self._write(
            update(newspapers_table)
            .where(newspapers_table.c.id == str(newspaper.id))
            .values(**values)
        )

    async def delete(self, newspaper_id: NewspaperId) -> bool:
        result = await self._write(
            delete(newspapers_table).where(newspapers_table.c.id == str(newspaper_id))
        )
        return result.rowcount > 0
