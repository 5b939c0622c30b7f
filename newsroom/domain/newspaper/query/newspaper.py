"""Public newspaper queries."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel

from newsroom.domain.newspaper.model.newspaper import Newspaper
from newsroom.domain.newspaper.model.value import NewspaperId
from newsroom.domain.newspaper.service.newspaper import NewspaperService
from newsroom.domain.shared.authorization.gate import public
from newsroom.domain.shared.query import Query, QueryHandler
from newsroom.domain.shared.query import Result as QueryResult


class NewspaperDTO(BaseModel):
    id: str
    title: str
    issue_date: date
    pdf_url: str
    cover_image: str | None
    created_at: datetime

    @classmethod
    def from_newspaper(cls, newspaper: Newspaper) -> "NewspaperDTO":
        return cls(
            id=str(newspaper.id),
            title=newspaper.title,
            issue_date=newspaper.issue_date,
            pdf_url=newspaper.pdf_url,
            cover_image=newspaper.cover_image,
            created_at=newspaper.created_at,
        )


class NewspaperResult(QueryResult):
    newspaper: NewspaperDTO


class GetNewspaper(Query):
    newspaper_id: UUID


class GetNewspaperHandler(QueryHandler[GetNewspaper, NewspaperResult]):
    __auth__ = public()
    newspaper_service: NewspaperService

    async def run(self, query: GetNewspaper) -> NewspaperResult:
        newspaper = await self.newspaper_service.get(NewspaperId(query.newspaper_id))
        return NewspaperResult(newspaper=NewspaperDTO.from_newspaper(newspaper))


class ListNewspapers(Query):
    from_date: date | None = None
    to_date: date | None = None


class ListNewspapersResult(QueryResult):
    newspapers: list[NewspaperDTO]


class ListNewspapersHandler(QueryHandler[ListNewspapers, ListNewspapersResult]):
    __auth__ = public()
    newspaper_service: NewspaperService

    async def run(self, query: ListNewspapers) -> ListNewspapersResult:
        newspapers = await self.newspaper_service.list(
            from_date=query.from_date, to_date=query.to_date
        )
        return ListNewspapersResult(
            newspapers=[NewspaperDTO.from_newspaper(n) for n in newspapers]
        )
