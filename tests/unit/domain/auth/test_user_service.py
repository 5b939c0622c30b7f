"""Unit tests for UserService administrative and profile operations."""

from unittest.mock import AsyncMock

import pytest

from newsroom.config import JwtConfig
from newsroom.domain.auth.model.principal import Principal
from newsroom.domain.auth.model.role import Role
from newsroom.domain.auth.model.user import User
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.auth.service.authorization import AuthorizationGate
from newsroom.domain.auth.service.password import PasswordHasher
from newsroom.domain.auth.service.token import TokenService
from newsroom.domain.auth.service.user import UserService
from newsroom.domain.shared.error import (
    AuthorizationError,
    DuplicateIdentityError,
    ForbiddenRoleError,
    NotFoundError,
)

HASHER = PasswordHasher(_rounds=4)


def _principal(role: Role, user_id: UserId | None = None) -> Principal:
    return Principal(user_id=user_id or UserId.generate(), role=role)


def _user(role: Role = Role.USER, email: str = "target@example.com") -> User:
    return User.create(email=email, password_hash=HASHER.hash("secret123"), full_name="T", role=role)


@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get.return_value = None
    repo.get_by_email.return_value = None
    return repo


@pytest.fixture
def service(user_repo: AsyncMock) -> UserService:
    gate = AuthorizationGate(
        _token_service=TokenService(_config=JwtConfig(secret="test-secret-for-unit-tests-min-32"))
    )
    return UserService(_user_repo=user_repo, _password_hasher=HASHER, _gate=gate)


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_admin_creates_reporter(self, service: UserService, user_repo: AsyncMock) -> None:
        user = await service.create_user(
            _principal(Role.ADMIN), "rep@example.com", "Rep", "secret123", role=Role.REPORTER
        )

        assert user.role == Role.REPORTER
        user_repo.save.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_admin_cannot_create_admin(
        self, service: UserService, user_repo: AsyncMock
    ) -> None:
        with pytest.raises(ForbiddenRoleError):
            await service.create_user(
                _principal(Role.ADMIN), "adm@example.com", "Adm", "secret123", role=Role.ADMIN
            )
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(
        self, service: UserService, user_repo: AsyncMock
    ) -> None:
        user_repo.get_by_email.return_value = _user()
        with pytest.raises(DuplicateIdentityError):
            await service.create_user(
                _principal(Role.SUPER_ADMIN), "target@example.com", "T", "secret123"
            )


class TestUpdateUser:
    @pytest.mark.asyncio
    async def test_missing_user_is_not_found(self, service: UserService) -> None:
        with pytest.raises(NotFoundError):
            await service.update_user(_principal(Role.ADMIN), UserId.generate(), full_name="X")

    @pytest.mark.asyncio
    async def test_admin_edits_profile_fields(
        self, service: UserService, user_repo: AsyncMock
    ) -> None:
        target = _user(Role.EDITOR)
        user_repo.get.return_value = target

        updated = await service.update_user(
            _principal(Role.ADMIN), target.id, full_name="Renamed", role=Role.EDITOR
        )

        assert updated.full_name == "Renamed"
        assert updated.role == Role.EDITOR
        user_repo.update.assert_awaited_once_with(target)

    @pytest.mark.asyncio
    async def test_admin_role_change_denied(
        self, service: UserService, user_repo: AsyncMock
    ) -> None:
        target = _user(Role.USER)
        user_repo.get.return_value = target

        with pytest.raises(AuthorizationError):
            await service.update_user(_principal(Role.ADMIN), target.id, role=Role.EDITOR)

        assert target.role == Role.USER
        user_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_super_admin_changes_role(
        self, service: UserService, user_repo: AsyncMock
    ) -> None:
        target = _user(Role.USER)
        user_repo.get.return_value = target

        updated = await service.update_user(
            _principal(Role.SUPER_ADMIN), target.id, role=Role.EDITOR
        )

        assert updated.role == Role.EDITOR

    @pytest.mark.asyncio
    async def test_own_role_in_self_update_denied(
        self, service: UserService, user_repo: AsyncMock
    ) -> None:
        me = _user(Role.ADMIN, email="admin@example.com")
        user_repo.get.return_value = me

        with pytest.raises(AuthorizationError):
            await service.update_user(
                _principal(Role.ADMIN, user_id=me.id), me.id, full_name="Me", role=Role.ADMIN
            )

        assert me.full_name == "T"
        user_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_self_update_without_role_allowed(
        self, service: UserService, user_repo: AsyncMock
    ) -> None:
        me = _user(Role.ADMIN, email="admin@example.com")
        user_repo.get.return_value = me

        updated = await service.update_user(
            _principal(Role.ADMIN, user_id=me.id), me.id, full_name="Me"
        )

        assert updated.full_name == "Me"

    @pytest.mark.asyncio
    async def test_password_change_rehashes(
        self, service: UserService, user_repo: AsyncMock
    ) -> None:
        target = _user(Role.USER)
        user_repo.get.return_value = target

        await service.update_user(_principal(Role.ADMIN), target.id, password="newsecret")

        assert HASHER.verify("newsecret", target.password_hash)


class TestDeleteUser:
    @pytest.mark.asyncio
    async def test_admin_deleting_super_admin_denied(
        self, service: UserService, user_repo: AsyncMock
    ) -> None:
        user_repo.get.return_value = _user(Role.SUPER_ADMIN)

        with pytest.raises(AuthorizationError):
            await service.delete_user(_principal(Role.ADMIN), UserId.generate())

        user_repo.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_super_admin_cannot_delete_self(
        self, service: UserService, user_repo: AsyncMock
    ) -> None:
        me = _user(Role.SUPER_ADMIN)
        user_repo.get.return_value = me

        with pytest.raises(AuthorizationError):
            await service.delete_user(_principal(Role.SUPER_ADMIN, user_id=me.id), me.id)

    @pytest.mark.asyncio
    async def test_super_admin_deletes_editor(
        self, service: UserService, user_repo: AsyncMock
    ) -> None:
        target = _user(Role.EDITOR)
        user_repo.get.return_value = target

        await service.delete_user(_principal(Role.SUPER_ADMIN), target.id)

        user_repo.delete.assert_awaited_once_with(target.id)


class TestProfile:
    @pytest.mark.asyncio
    async def test_update_profile_keeps_role(
        self, service: UserService, user_repo: AsyncMock
    ) -> None:
        me = _user(Role.REPORTER)
        user_repo.get.return_value = me

        updated = await service.update_profile(
            _principal(Role.REPORTER, user_id=me.id), full_name="New Name", avatar="a.png"
        )

        assert updated.full_name == "New Name"
        assert updated.avatar == "a.png"
        assert updated.role == Role.REPORTER

    @pytest.mark.asyncio
    async def test_profile_email_taken_by_other(
        self, service: UserService, user_repo: AsyncMock
    ) -> None:
        me = _user(Role.USER, email="me@example.com")
        user_repo.get.return_value = me
        user_repo.get_by_email.return_value = _user(Role.USER, email="taken@example.com")

        with pytest.raises(DuplicateIdentityError):
            await service.update_profile(
                _principal(Role.USER, user_id=me.id), email="taken@example.com"
            )
