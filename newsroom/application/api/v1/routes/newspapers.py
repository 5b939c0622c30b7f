"""Newspaper issue routes. Reads are public; writes need EDITOR."""

from datetime import date
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from newsroom.domain.newspaper.command.newspaper import (
    CreateNewspaper,
    CreateNewspaperHandler,
    DeleteNewspaper,
    DeleteNewspaperHandler,
    UpdateNewspaper,
    UpdateNewspaperHandler,
)
from newsroom.domain.newspaper.query.newspaper import (
    GetNewspaper,
    GetNewspaperHandler,
    ListNewspapers,
    ListNewspapersHandler,
    NewspaperDTO,
)

router = APIRouter(prefix="/newspapers", tags=["Newspapers"], route_class=DishkaRoute)


class UpdateNewspaperRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    issue_date: date | None = None
    pdf_url: str | None = Field(default=None, min_length=1)
    cover_image: str | None = None


class NewspaperListResponse(BaseModel):
    newspapers: list[NewspaperDTO]


@router.post("", response_model=NewspaperDTO, status_code=201)
async def create_newspaper(
    body: CreateNewspaper, handler: FromDishka[CreateNewspaperHandler]
) -> NewspaperDTO:
    result = await handler.run(body)
    return result.newspaper


@router.get("", response_model=NewspaperListResponse)
async def list_newspapers(
    handler: FromDishka[ListNewspapersHandler],
    from_date: date | None = None,
    to_date: date | None = None,
) -> NewspaperListResponse:
    result = await handler.run(ListNewspapers(from_date=from_date, to_date=to_date))
    return NewspaperListResponse(newspapers=result.newspapers)


@router.get("/{newspaper_id}", response_model=NewspaperDTO)
async def get_newspaper(
    newspaper_id: UUID, handler: FromDishka[GetNewspaperHandler]
) -> NewspaperDTO:
    result = await handler.run(GetNewspaper(newspaper_id=newspaper_id))
    return result.newspaper


@router.patch("/{newspaper_id}", response_model=NewspaperDTO)
async def update_newspaper(
    newspaper_id: UUID,
    body: UpdateNewspaperRequest,
    handler: FromDishka[UpdateNewspaperHandler],
) -> NewspaperDTO:
    result = await handler.run(
        UpdateNewspaper(newspaper_id=newspaper_id, **body.model_dump(exclude_unset=True))
    )
    return result.newspaper


@router.delete("/{newspaper_id}", status_code=204)
async def delete_newspaper(
    newspaper_id: UUID, handler: FromDishka[DeleteNewspaperHandler]
) -> Response:
    await handler.run(DeleteNewspaper(newspaper_id=newspaper_id))
    return Response(status_code=204)
