"""Liveness and database health."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.config import Config

router = APIRouter(tags=["Health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    name: str
    version: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health(session: FromDishka[AsyncSession], config: FromDishka[Config]) -> HealthResponse:
    """Report service status. Public."""
    await session.execute(text("SELECT 1"))
    return HealthResponse(
        status="ok",
        name=config.server.name,
        version=config.server.version,
        database="ok",
    )
