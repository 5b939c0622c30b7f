"""Tests for handler-level gates and their enforcement."""

import logging

import pytest

from newsroom.domain.auth.model.identity import Anonymous, Identity
from newsroom.domain.auth.model.principal import Principal
from newsroom.domain.auth.model.role import Role
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.shared.authorization.gate import (
    AtLeast,
    GateState,
    Public,
    at_least,
    enforce_gate,
    public,
)
from newsroom.domain.shared.command import Command, CommandHandler, Result
from newsroom.domain.shared.error import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
)


def _principal(role: Role) -> Principal:
    return Principal(user_id=UserId.generate(), role=role)


class _Ping(Command): ...


class _Pong(Result):
    ok: bool = True


class _EditorOnlyHandler(CommandHandler[_Ping, _Pong]):
    __auth__ = at_least(Role.EDITOR)
    identity: Identity

    async def run(self, cmd: _Ping) -> _Pong:
        return _Pong()


class TestGateConstructors:
    def test_public_returns_shared_instance(self) -> None:
        assert public() is public()
        assert isinstance(public(), Public)

    def test_at_least_records_role(self) -> None:
        gate = at_least(Role.ADMIN)
        assert isinstance(gate, AtLeast)
        assert gate.role == Role.ADMIN


class TestEnforceGate:
    def test_public_admits_anonymous(self) -> None:
        assert enforce_gate("H", public(), Anonymous()) == GateState.AUTHORIZED

    def test_missing_gate_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            enforce_gate("H", None, Anonymous())

    def test_anonymous_rejected_as_unauthenticated(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="newsroom.authz"):
            with pytest.raises(AuthenticationError):
                enforce_gate("H", at_least(Role.USER), Anonymous())
        assert "state=unauthenticated" in caplog.text

    def test_rejected_token_logged_as_token_invalid(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="newsroom.authz"):
            with pytest.raises(AuthenticationError):
                enforce_gate("H", at_least(Role.USER), Anonymous(reason="token_expired"))
        assert "state=token_invalid" in caplog.text

    def test_bare_identity_is_not_a_principal(self) -> None:
        with pytest.raises(AuthenticationError):
            enforce_gate("H", at_least(Role.USER), Identity())

    def test_role_below_threshold_forbidden(self) -> None:
        with pytest.raises(AuthorizationError) as exc_info:
            enforce_gate("H", at_least(Role.ADMIN), _principal(Role.EDITOR))
        assert exc_info.value.message == "Access denied"

    @pytest.mark.parametrize("role", [Role.ADMIN, Role.SUPER_ADMIN])
    def test_role_at_or_above_threshold_authorized(self, role: Role) -> None:
        assert enforce_gate("H", at_least(Role.ADMIN), _principal(role)) == GateState.AUTHORIZED


class TestHandlerWrapping:
    @pytest.mark.asyncio
    async def test_run_is_gated(self) -> None:
        handler = _EditorOnlyHandler(identity=_principal(Role.REPORTER))
        with pytest.raises(AuthorizationError):
            await handler.run(_Ping())

    @pytest.mark.asyncio
    async def test_run_passes_for_sufficient_role(self) -> None:
        handler = _EditorOnlyHandler(identity=_principal(Role.EDITOR))
        result = await handler.run(_Ping())
        assert result.ok is True

    @pytest.mark.asyncio
    async def test_anonymous_caller_rejected_before_run(self) -> None:
        handler = _EditorOnlyHandler(identity=Anonymous())
        with pytest.raises(AuthenticationError):
            await handler.run(_Ping())
