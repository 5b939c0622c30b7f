"""Register and Login commands (public)."""

from pydantic import EmailStr, Field

from newsroom.domain.auth.model.identity import Identity
from newsroom.domain.auth.model.role import RoleName
from newsroom.domain.auth.query.get_user import UserDTO
from newsroom.domain.auth.service.auth import AuthService
from newsroom.domain.shared.authorization.gate import public
from newsroom.domain.shared.command import Command, CommandHandler, Result


class AuthResult(Result):
    """A user plus a freshly issued access token."""

    user: UserDTO
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class Register(Command):
    email: EmailStr
    full_name: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=6, max_length=72)
    avatar: str | None = None
    role: RoleName | None = None


class RegisterHandler(CommandHandler[Register, AuthResult]):
    __auth__ = public()
    identity: Identity
    auth_service: AuthService

    async def run(self, cmd: Register) -> AuthResult:
        user, token = await self.auth_service.register(
            email=cmd.email,
            full_name=cmd.full_name,
            password=cmd.password,
            avatar=cmd.avatar,
            role=cmd.role,
        )
        return AuthResult(
            user=UserDTO.from_user(user),
            access_token=token,
            expires_in=self.auth_service.access_token_expire_seconds,
        )


class Login(Command):
    email: EmailStr
    password: str = Field(min_length=1)


class LoginHandler(CommandHandler[Login, AuthResult]):
    __auth__ = public()
    identity: Identity
    auth_service: AuthService

    async def run(self, cmd: Login) -> AuthResult:
        user, token = await self.auth_service.login(email=cmd.email, password=cmd.password)
        return AuthResult(
            user=UserDTO.from_user(user),
            access_token=token,
            expires_in=self.auth_service.access_token_expire_seconds,
        )
