"""Registration, login and the caller's own profile."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from newsroom.domain.auth.command.register import (
    AuthResult,
    Login,
    LoginHandler,
    Register,
    RegisterHandler,
)
from newsroom.domain.auth.command.user import UpdateProfile, UpdateProfileHandler
from newsroom.domain.auth.query.get_user import GetProfile, GetProfileHandler, UserDTO

router = APIRouter(prefix="/auth", tags=["Auth"], route_class=DishkaRoute)


@router.post("/register", response_model=AuthResult, status_code=201)
async def register(body: Register, handler: FromDishka[RegisterHandler]) -> AuthResult:
    """Create an account and return it with an access token.

    ``role`` defaults to USER; SUPER_ADMIN is always refused.
    """
    return await handler.run(body)


@router.post("/login", response_model=AuthResult)
async def login(body: Login, handler: FromDishka[LoginHandler]) -> AuthResult:
    """Exchange email and password for an access token."""
    return await handler.run(body)


@router.get("/profile", response_model=UserDTO)
async def get_profile(handler: FromDishka[GetProfileHandler]) -> UserDTO:
    """The authenticated caller's account."""
    result = await handler.run(GetProfile())
    return result.user


@router.patch("/profile", response_model=UserDTO)
async def update_profile(
    body: UpdateProfile, handler: FromDishka[UpdateProfileHandler]
) -> UserDTO:
    """Edit the authenticated caller's account. The role cannot be changed here."""
    result = await handler.run(body)
    return result.user
