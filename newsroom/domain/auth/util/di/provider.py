"""DI provider for auth domain."""

import logging

from dishka import Provider, Scope, from_context, provide
from starlette.requests import Request

from newsroom.config import Config
from newsroom.domain.auth.command.register import LoginHandler, RegisterHandler
from newsroom.domain.auth.command.user import (
    CreateUserHandler,
    DeleteUserHandler,
    UpdateProfileHandler,
    UpdateUserHandler,
)
from newsroom.domain.auth.model.identity import Identity
from newsroom.domain.auth.port.repository import UserRepository
from newsroom.domain.auth.query.get_user import GetProfileHandler, GetUserHandler
from newsroom.domain.auth.query.list_users import ListUsersHandler
from newsroom.domain.auth.service.auth import AuthService
from newsroom.domain.auth.service.authorization import AuthorizationGate
from newsroom.domain.auth.service.bootstrap import BootstrapService
from newsroom.domain.auth.service.password import PasswordHasher
from newsroom.domain.auth.service.token import TokenService
from newsroom.domain.auth.service.user import UserService

logger = logging.getLogger(__name__)

_BEARER = "bearer "


def bearer_token(request: Request) -> str | None:
    """Extract the token from an ``Authorization: Bearer`` header, if any."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.lower().startswith(_BEARER):
        return None
    return auth_header[len(_BEARER) :].strip() or None


class AuthProvider(Provider):
    """DI provider for auth domain services and handlers."""

    request = from_context(provides=Request, scope=Scope.REQUEST)

    # Command Handlers
    register_handler = provide(RegisterHandler, scope=Scope.REQUEST)
    login_handler = provide(LoginHandler, scope=Scope.REQUEST)
    create_user_handler = provide(CreateUserHandler, scope=Scope.REQUEST)
    update_user_handler = provide(UpdateUserHandler, scope=Scope.REQUEST)
    delete_user_handler = provide(DeleteUserHandler, scope=Scope.REQUEST)
    update_profile_handler = provide(UpdateProfileHandler, scope=Scope.REQUEST)

    # Query Handlers
    get_user_handler = provide(GetUserHandler, scope=Scope.REQUEST)
    get_profile_handler = provide(GetProfileHandler, scope=Scope.REQUEST)
    list_users_handler = provide(ListUsersHandler, scope=Scope.REQUEST)

    @provide(scope=Scope.APP)
    def get_token_service(self, config: Config) -> TokenService:
        """Provide TokenService."""
        return TokenService(_config=config.auth.jwt)

    @provide(scope=Scope.APP)
    def get_password_hasher(self, config: Config) -> PasswordHasher:
        return PasswordHasher(_rounds=config.auth.password.bcrypt_rounds)

    @provide(scope=Scope.APP)
    def get_authorization_gate(self, token_service: TokenService) -> AuthorizationGate:
        return AuthorizationGate(_token_service=token_service)

    @provide(scope=Scope.REQUEST)
    def get_auth_service(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> AuthService:
        """Provide AuthService."""
        return AuthService(
            _user_repo=user_repo,
            _password_hasher=password_hasher,
            _token_service=token_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_user_service(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        gate: AuthorizationGate,
    ) -> UserService:
        return UserService(
            _user_repo=user_repo,
            _password_hasher=password_hasher,
            _gate=gate,
        )

    @provide(scope=Scope.REQUEST)
    def get_bootstrap_service(
        self,
        config: Config,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
    ) -> BootstrapService:
        return BootstrapService(
            _user_repo=user_repo,
            _password_hasher=password_hasher,
            _config=config.auth.bootstrap,
        )

    @provide(scope=Scope.REQUEST)
    def get_identity(self, request: Request, gate: AuthorizationGate) -> Identity:
        """Resolve Identity from the bearer token.

        Returns Anonymous for unauthenticated requests, Principal for authenticated.
        Handlers decide through __auth__ whether Anonymous is acceptable.
        """
        return gate.identify(bearer_token(request))
