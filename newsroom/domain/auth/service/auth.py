"""Auth service for registration and login."""

import logging

from newsroom.domain.auth.model.role import Role
from newsroom.domain.auth.model.user import User
from newsroom.domain.auth.port.repository import UserRepository
from newsroom.domain.auth.service.password import PasswordHasher
from newsroom.domain.auth.service.token import TokenService
from newsroom.domain.shared.error import (
    DuplicateIdentityError,
    ForbiddenRoleError,
    InvalidCredentialsError,
)
from newsroom.domain.shared.service import Service

logger = logging.getLogger(__name__)


class AuthService(Service):
    """Orchestrates authentication flows.

    - register: Create an account and issue a token
    - login: Verify credentials and issue a token

    The only place access tokens are issued.
    """

    _user_repo: UserRepository
    _password_hasher: PasswordHasher
    _token_service: TokenService

    async def register(
        self,
        email: str,
        full_name: str,
        password: str,
        avatar: str | None = None,
        role: Role | None = None,
    ) -> tuple[User, str]:
        """Self-register a new account.

        Returns:
            Tuple of (user, access_token)

        Raises:
            DuplicateIdentityError: If the email is already registered
            ForbiddenRoleError: If SUPER_ADMIN was requested
        """
        email = email.lower()
        if await self._user_repo.get_by_email(email) is not None:
            raise DuplicateIdentityError("User with this email already exists")

        if role == Role.SUPER_ADMIN:
            logger.warning("Registration attempted with SUPER_ADMIN role: email=%s", email)
            raise ForbiddenRoleError("Cannot register with this role")

        user = User.create(
            email=email,
            password_hash=self._password_hasher.hash(password),
            full_name=full_name,
            role=role or Role.USER,
            avatar=avatar,
        )
        # A concurrent registration of the same email fails here as DuplicateIdentityError
        await self._user_repo.save(user)

        logger.info("User registered: user_id=%s, role=%s", user.id, user.role.name)
        return user, self._token_service.issue(user.id, user.role)

    async def login(self, email: str, password: str) -> tuple[User, str]:
        """Verify credentials and issue a fresh token.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password (indistinguishable)
        """
        user = await self._user_repo.get_by_email(email.lower())
        if user is None:
            self._password_hasher.verify_dummy(password)
            logger.info("Login failed: unknown email")
            raise InvalidCredentialsError("Invalid credentials")

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info("Login failed: bad password for user_id=%s", user.id)
            raise InvalidCredentialsError("Invalid credentials")

        logger.info("User logged in: user_id=%s", user.id)
        return user, self._token_service.issue(user.id, user.role)

    @property
    def access_token_expire_seconds(self) -> int:
        return self._token_service.access_token_expire_seconds
