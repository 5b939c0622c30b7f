"""Unit tests for AuthService registration and login."""

from unittest.mock import AsyncMock

import pytest

from newsroom.config import JwtConfig
from newsroom.domain.auth.model.role import Role
from newsroom.domain.auth.model.user import User
from newsroom.domain.auth.service.auth import AuthService
from newsroom.domain.auth.service.password import PasswordHasher
from newsroom.domain.auth.service.token import TokenService
from newsroom.domain.shared.error import (
    DuplicateIdentityError,
    ForbiddenRoleError,
    InvalidCredentialsError,
)

HASHER = PasswordHasher(_rounds=4)


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(_config=JwtConfig(secret="test-secret-for-unit-tests-min-32"))


@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_email.return_value = None
    return repo


@pytest.fixture
def service(user_repo: AsyncMock, token_service: TokenService) -> AuthService:
    return AuthService(
        _user_repo=user_repo,
        _password_hasher=HASHER,
        _token_service=token_service,
    )


def _existing_user(email: str = "reader@example.com", password: str = "secret123") -> User:
    return User.create(email=email, password_hash=HASHER.hash(password), full_name="Reader")


class TestRegister:
    @pytest.mark.asyncio
    async def test_defaults_to_user_role(
        self, service: AuthService, user_repo: AsyncMock, token_service: TokenService
    ) -> None:
        user, token = await service.register("New@Example.com", "New Reader", "secret123")

        assert user.role == Role.USER
        assert user.email == "new@example.com"
        user_repo.save.assert_awaited_once_with(user)
        claims = token_service.verify(token)
        assert claims.sub == user.id
        assert claims.role == Role.USER

    @pytest.mark.asyncio
    async def test_password_is_stored_hashed(self, service: AuthService) -> None:
        user, _ = await service.register("a@example.com", "A", "secret123")

        assert user.password_hash != "secret123"
        assert HASHER.verify("secret123", user.password_hash)

    @pytest.mark.asyncio
    async def test_non_super_admin_role_may_be_requested(self, service: AuthService) -> None:
        user, _ = await service.register("rep@example.com", "Rep", "secret123", role=Role.REPORTER)
        assert user.role == Role.REPORTER

    @pytest.mark.asyncio
    async def test_super_admin_role_forbidden(
        self, service: AuthService, user_repo: AsyncMock
    ) -> None:
        with pytest.raises(ForbiddenRoleError):
            await service.register("x@example.com", "X", "secret123", role=Role.SUPER_ADMIN)

        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(
        self, service: AuthService, user_repo: AsyncMock
    ) -> None:
        user_repo.get_by_email.return_value = _existing_user()

        with pytest.raises(DuplicateIdentityError):
            await service.register("reader@example.com", "Again", "secret123")

        user_repo.save.assert_not_awaited()


class TestLogin:
    @pytest.mark.asyncio
    async def test_correct_credentials_issue_token(
        self, service: AuthService, user_repo: AsyncMock, token_service: TokenService
    ) -> None:
        existing = _existing_user()
        user_repo.get_by_email.return_value = existing

        user, token = await service.login("READER@example.com", "secret123")

        assert user is existing
        user_repo.get_by_email.assert_awaited_once_with("reader@example.com")
        assert token_service.verify(token).sub == existing.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_are_indistinguishable(
        self, service: AuthService, user_repo: AsyncMock
    ) -> None:
        user_repo.get_by_email.return_value = _existing_user()
        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await service.login("reader@example.com", "wrong-password")

        user_repo.get_by_email.return_value = None
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await service.login("nobody@example.com", "wrong-password")

        assert wrong_password.value.message == unknown_email.value.message
        assert wrong_password.value.code == unknown_email.value.code
