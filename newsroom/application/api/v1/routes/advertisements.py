"""Advertisement routes. Reads are public; writes need ADMIN."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from newsroom.domain.advertisement.command.advertisement import (
    CreateAdvertisement,
    CreateAdvertisementHandler,
    DeleteAdvertisement,
    DeleteAdvertisementHandler,
    UpdateAdvertisement,
    UpdateAdvertisementHandler,
)
from newsroom.domain.advertisement.query.advertisement import (
    AdvertisementDTO,
    GetAdvertisement,
    GetAdvertisementHandler,
    ListAdvertisements,
    ListAdvertisementsHandler,
)

router = APIRouter(prefix="/advertisements", tags=["Advertisements"], route_class=DishkaRoute)


class UpdateAdvertisementRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    image_url: str | None = Field(default=None, min_length=1)
    link: str | None = None
    is_active: bool | None = None
    expiry_date: datetime | None = None


class AdvertisementListResponse(BaseModel):
    advertisements: list[AdvertisementDTO]


@router.post("", response_model=AdvertisementDTO, status_code=201)
async def create_advertisement(
    body: CreateAdvertisement, handler: FromDishka[CreateAdvertisementHandler]
) -> AdvertisementDTO:
    result = await handler.run(body)
    return result.advertisement


@router.get("", response_model=AdvertisementListResponse)
async def list_advertisements(
    handler: FromDishka[ListAdvertisementsHandler],
    is_active: bool = True,
) -> AdvertisementListResponse:
    result = await handler.run(ListAdvertisements(is_active=is_active))
    return AdvertisementListResponse(advertisements=result.advertisements)


@router.get("/{advertisement_id}", response_model=AdvertisementDTO)
async def get_advertisement(
    advertisement_id: UUID, handler: FromDishka[GetAdvertisementHandler]
) -> AdvertisementDTO:
    result = await handler.run(GetAdvertisement(advertisement_id=advertisement_id))
    return result.advertisement


@router.patch("/{advertisement_id}", response_model=AdvertisementDTO)
async def update_advertisement(
    advertisement_id: UUID,
    body: UpdateAdvertisementRequest,
    handler: FromDishka[UpdateAdvertisementHandler],
) -> AdvertisementDTO:
    result = await handler.run(
        UpdateAdvertisement(
            advertisement_id=advertisement_id, **body.model_dump(exclude_unset=True)
        )
    )
    return result.advertisement


@router.delete("/{advertisement_id}", status_code=204)
async def delete_advertisement(
    advertisement_id: UUID, handler: FromDishka[DeleteAdvertisementHandler]
) -> Response:
    await handler.run(DeleteAdvertisement(advertisement_id=advertisement_id))
    return Response(status_code=204)
