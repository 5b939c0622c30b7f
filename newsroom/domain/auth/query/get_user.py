"""GetUser and GetProfile queries and handlers."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from newsroom.domain.auth.model.identity import Identity
from newsroom.domain.auth.model.principal import Principal
from newsroom.domain.auth.model.role import Role, RoleName
from newsroom.domain.auth.model.user import User
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.auth.service.user import UserService
from newsroom.domain.shared.authorization.gate import at_least
from newsroom.domain.shared.query import Query, QueryHandler
from newsroom.domain.shared.query import Result as QueryResult


class UserDTO(BaseModel):
    """Public view of a user. Never carries the password hash."""

    id: str
    email: str
    full_name: str
    avatar: str | None
    role: RoleName
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserDTO":
        return cls(
            id=str(user.id),
            email=user.email,
            full_name=user.full_name,
            avatar=user.avatar,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class GetUser(Query):
    user_id: UUID


class GetUserResult(QueryResult):
    user: UserDTO


class GetUserHandler(QueryHandler[GetUser, GetUserResult]):
    __auth__ = at_least(Role.ADMIN)
    identity: Identity
    user_service: UserService

    async def run(self, query: GetUser) -> GetUserResult:
        user = await self.user_service.get_user(UserId(query.user_id))
        return GetUserResult(user=UserDTO.from_user(user))


class GetProfile(Query):
    """The caller's own account."""


class GetProfileHandler(QueryHandler[GetProfile, GetUserResult]):
    __auth__ = at_least(Role.USER)
    identity: Identity
    user_service: UserService

    async def run(self, query: GetProfile) -> GetUserResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate
        user = await self.user_service.get_profile(self.identity)
        return GetUserResult(user=UserDTO.from_user(user))
