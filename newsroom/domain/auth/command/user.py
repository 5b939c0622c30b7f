"""Administrative user commands: create, update, delete."""

from uuid import UUID

from pydantic import EmailStr, Field

from newsroom.domain.auth.model.identity import Identity
from newsroom.domain.auth.model.principal import Principal
from newsroom.domain.auth.model.role import Role, RoleName
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.auth.query.get_user import UserDTO
from newsroom.domain.auth.service.user import UserService
from newsroom.domain.shared.authorization.gate import at_least
from newsroom.domain.shared.command import Command, CommandHandler, Result


class UserResult(Result):
    user: UserDTO


class CreateUser(Command):
    email: EmailStr
    full_name: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=6, max_length=72)
    role: RoleName = Role.USER
    avatar: str | None = None


class CreateUserHandler(CommandHandler[CreateUser, UserResult]):
    __auth__ = at_least(Role.ADMIN)
    identity: Identity
    user_service: UserService

    async def run(self, cmd: CreateUser) -> UserResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate
        user = await self.user_service.create_user(
            self.identity,
            email=cmd.email,
            full_name=cmd.full_name,
            password=cmd.password,
            role=cmd.role,
            avatar=cmd.avatar,
        )
        return UserResult(user=UserDTO.from_user(user))


class UpdateUser(Command):
    user_id: UUID
    email: EmailStr | None = None
    full_name: str | None = Field(default=None, min_length=1, max_length=255)
    password: str | None = Field(default=None, min_length=6, max_length=72)
    role: RoleName | None = None
    avatar: str | None = None


class UpdateUserHandler(CommandHandler[UpdateUser, UserResult]):
    __auth__ = at_least(Role.ADMIN)
    identity: Identity
    user_service: UserService

    async def run(self, cmd: UpdateUser) -> UserResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate
        user = await self.user_service.update_user(
            self.identity,
            UserId(cmd.user_id),
            email=cmd.email,
            full_name=cmd.full_name,
            avatar=cmd.avatar,
            password=cmd.password,
            role=cmd.role,
        )
        return UserResult(user=UserDTO.from_user(user))


class DeleteUser(Command):
    user_id: UUID


class DeleteUserResult(Result):
    deleted: bool = True


class DeleteUserHandler(CommandHandler[DeleteUser, DeleteUserResult]):
    __auth__ = at_least(Role.SUPER_ADMIN)
    identity: Identity
    user_service: UserService

    async def run(self, cmd: DeleteUser) -> DeleteUserResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate
        await self.user_service.delete_user(self.identity, UserId(cmd.user_id))
        return DeleteUserResult()


class UpdateProfile(Command):
    """Edit the caller's own account. Has no role field."""

    email: EmailStr | None = None
    full_name: str | None = Field(default=None, min_length=1, max_length=255)
    password: str | None = Field(default=None, min_length=6, max_length=72)
    avatar: str | None = None


class UpdateProfileHandler(CommandHandler[UpdateProfile, UserResult]):
    __auth__ = at_least(Role.USER)
    identity: Identity
    user_service: UserService

    async def run(self, cmd: UpdateProfile) -> UserResult:
        assert isinstance(self.identity, Principal)  # Guaranteed by __auth__ gate
        user = await self.user_service.update_profile(
            self.identity,
            email=cmd.email,
            full_name=cmd.full_name,
            avatar=cmd.avatar,
            password=cmd.password,
        )
        return UserResult(user=UserDTO.from_user(user))
