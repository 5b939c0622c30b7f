"""Administrative user management."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel, EmailStr, Field

from newsroom.domain.auth.command.user import (
    CreateUser,
    CreateUserHandler,
    DeleteUser,
    DeleteUserHandler,
    UpdateUser,
    UpdateUserHandler,
)
from newsroom.domain.auth.model.role import RoleName
from newsroom.domain.auth.query.get_user import GetUser, GetUserHandler, UserDTO
from newsroom.domain.auth.query.list_users import ListUsers, ListUsersHandler

router = APIRouter(prefix="/users", tags=["Users"], route_class=DishkaRoute)


class UpdateUserRequest(BaseModel):
    email: EmailStr | None = None
    full_name: str | None = Field(default=None, min_length=1, max_length=255)
    password: str | None = Field(default=None, min_length=6, max_length=72)
    role: RoleName | None = None
    avatar: str | None = None


class UserListResponse(BaseModel):
    users: list[UserDTO]


@router.post("", response_model=UserDTO, status_code=201)
async def create_user(body: CreateUser, handler: FromDishka[CreateUserHandler]) -> UserDTO:
    """Provision an account. Requires ADMIN; the role must be below the caller's."""
    result = await handler.run(body)
    return result.user


@router.get("", response_model=UserListResponse)
async def list_users(
    handler: FromDishka[ListUsersHandler],
    role: str | None = None,
) -> UserListResponse:
    """List accounts, optionally by role. Requires ADMIN."""
    result = await handler.run(ListUsers(role=role))
    return UserListResponse(users=result.users)


@router.get("/{user_id}", response_model=UserDTO)
async def get_user(user_id: UUID, handler: FromDishka[GetUserHandler]) -> UserDTO:
    """Requires ADMIN."""
    result = await handler.run(GetUser(user_id=user_id))
    return result.user


@router.patch("/{user_id}", response_model=UserDTO)
async def update_user(
    user_id: UUID,
    body: UpdateUserRequest,
    handler: FromDishka[UpdateUserHandler],
) -> UserDTO:
    """Edit an account. Requires ADMIN; only SUPER_ADMIN may change roles."""
    result = await handler.run(
        UpdateUser(user_id=user_id, **body.model_dump(exclude_unset=True))
    )
    return result.user


@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: UUID, handler: FromDishka[DeleteUserHandler]) -> Response:
    """Delete an account. Requires SUPER_ADMIN; never self, never the SUPER_ADMIN."""
    await handler.run(DeleteUser(user_id=user_id))
    return Response(status_code=204)
