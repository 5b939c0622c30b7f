"""Unit tests for AuthorizationGate identity resolution and policy checks."""

from dataclasses import dataclass

import pytest

from newsroom.config import JwtConfig
from newsroom.domain.auth.model.identity import Anonymous
from newsroom.domain.auth.model.principal import Principal
from newsroom.domain.auth.model.role import Role
from newsroom.domain.auth.model.user import User
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.auth.service.authorization import AuthorizationGate
from newsroom.domain.auth.service.token import TokenService
from newsroom.domain.shared.authorization.resource import (
    ARTICLE_POLICY,
    COMMENT_POLICY,
    Operation,
)
from newsroom.domain.shared.error import AuthorizationError, ForbiddenRoleError


@dataclass
class _Owned:
    id: str
    owner_id: UserId


def _principal(role: Role, user_id: UserId | None = None) -> Principal:
    return Principal(user_id=user_id or UserId.generate(), role=role)


def _user(role: Role) -> User:
    return User.create(email="someone@example.com", password_hash="x", full_name="S", role=role)


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(_config=JwtConfig(secret="test-secret-for-unit-tests-min-32"))


@pytest.fixture
def gate(token_service: TokenService) -> AuthorizationGate:
    return AuthorizationGate(_token_service=token_service)


class TestIdentify:
    def test_no_token_is_anonymous(self, gate: AuthorizationGate) -> None:
        identity = gate.identify(None)
        assert isinstance(identity, Anonymous)
        assert identity.reason is None

    def test_bad_token_is_anonymous_with_reason(self, gate: AuthorizationGate) -> None:
        identity = gate.identify("garbage")
        assert isinstance(identity, Anonymous)
        assert identity.reason == "invalid_token"

    def test_valid_token_is_principal(
        self, gate: AuthorizationGate, token_service: TokenService
    ) -> None:
        user_id = UserId.generate()
        identity = gate.identify(token_service.issue(user_id, Role.REPORTER))

        assert identity == Principal(user_id=user_id, role=Role.REPORTER)


class TestAuthorizeMutation:
    def test_owner_allowed(self, gate: AuthorizationGate) -> None:
        me = _principal(Role.USER)
        gate.authorize_mutation(me, _Owned("c1", me.user_id), Operation.UPDATE, COMMENT_POLICY)

    def test_stranger_denied_with_generic_message(self, gate: AuthorizationGate) -> None:
        resource = _Owned("a1", UserId.generate())
        with pytest.raises(AuthorizationError) as exc_info:
            gate.authorize_mutation(
                _principal(Role.REPORTER), resource, Operation.DELETE, ARTICLE_POLICY
            )
        assert exc_info.value.message == "Access denied"

    def test_editor_may_edit_any_article(self, gate: AuthorizationGate) -> None:
        resource = _Owned("a1", UserId.generate())
        gate.authorize_mutation(_principal(Role.EDITOR), resource, Operation.UPDATE, ARTICLE_POLICY)


class TestAuthorizeUserCreation:
    def test_admin_creates_editor(self, gate: AuthorizationGate) -> None:
        gate.authorize_user_creation(_principal(Role.ADMIN), Role.EDITOR)

    @pytest.mark.parametrize("target", [Role.ADMIN, Role.SUPER_ADMIN])
    def test_admin_cannot_create_peer_or_above(
        self, gate: AuthorizationGate, target: Role
    ) -> None:
        with pytest.raises(ForbiddenRoleError):
            gate.authorize_user_creation(_principal(Role.ADMIN), target)

    def test_super_admin_cannot_create_super_admin(self, gate: AuthorizationGate) -> None:
        with pytest.raises(ForbiddenRoleError):
            gate.authorize_user_creation(_principal(Role.SUPER_ADMIN), Role.SUPER_ADMIN)


class TestAuthorizeUserUpdate:
    def test_admin_edits_editor_profile(self, gate: AuthorizationGate) -> None:
        gate.authorize_user_update(_principal(Role.ADMIN), _user(Role.EDITOR))

    def test_admin_cannot_touch_super_admin(self, gate: AuthorizationGate) -> None:
        with pytest.raises(AuthorizationError):
            gate.authorize_user_update(_principal(Role.ADMIN), _user(Role.SUPER_ADMIN))

    def test_admin_cannot_change_roles(self, gate: AuthorizationGate) -> None:
        with pytest.raises(AuthorizationError):
            gate.authorize_user_update(_principal(Role.ADMIN), _user(Role.USER), Role.REPORTER)

    def test_super_admin_changes_roles(self, gate: AuthorizationGate) -> None:
        gate.authorize_user_update(_principal(Role.SUPER_ADMIN), _user(Role.ADMIN), Role.EDITOR)

    def test_super_admin_cannot_demote_self(self, gate: AuthorizationGate) -> None:
        target = _user(Role.SUPER_ADMIN)
        actor = _principal(Role.SUPER_ADMIN, user_id=target.id)
        with pytest.raises(AuthorizationError):
            gate.authorize_user_update(actor, target, Role.ADMIN)


class TestAuthorizeUserDeletion:
    def test_super_admin_deletes_admin(self, gate: AuthorizationGate) -> None:
        gate.authorize_user_deletion(_principal(Role.SUPER_ADMIN), _user(Role.ADMIN))

    def test_admin_deleting_super_admin_denied(self, gate: AuthorizationGate) -> None:
        with pytest.raises(AuthorizationError):
            gate.authorize_user_deletion(_principal(Role.ADMIN), _user(Role.SUPER_ADMIN))

    def test_self_deletion_denied(self, gate: AuthorizationGate) -> None:
        target = _user(Role.EDITOR)
        with pytest.raises(AuthorizationError):
            gate.authorize_user_deletion(_principal(Role.SUPER_ADMIN, user_id=target.id), target)
