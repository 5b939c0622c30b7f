"""Handler-level authorization gates: public() and at_least(Role)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from newsroom.domain.auth.model.role import Role

authz_logger = logging.getLogger("newsroom.authz")


class GateState(StrEnum):
    """Per-request progress through the authorization gate."""

    UNAUTHENTICATED = "unauthenticated"
    TOKEN_INVALID = "token_invalid"
    IDENTIFIED = "identified"
    AUTHORIZED = "authorized"
    FORBIDDEN = "forbidden"


class Gate:
    """Base for handler-level authorization gates.

    Every CommandHandler/QueryHandler must declare ``__auth__: ClassVar[Gate]``.
    Subclasses define specific gate behaviors (public access, role checks, etc.).
    """


@dataclass(frozen=True)
class Public(Gate):
    """No authentication required."""


@dataclass(frozen=True)
class AtLeast(Gate):
    """Gate that requires the principal to have at least the given role."""

    role: "Role"


_PUBLIC = Public()


def public() -> Public:
    """Mark a handler as publicly accessible (no auth required)."""
    return _PUBLIC


def at_least(role: "Role") -> AtLeast:
    """Mark a handler as requiring at least the given role."""
    return AtLeast(role=role)


def enforce_gate(handler_name: str, gate: Any, identity: Any) -> GateState:
    """Admit or reject a request at handler level.

    Returns GateState.AUTHORIZED, or raises AuthenticationError (no valid
    principal) or AuthorizationError (role too low).
    """
    from newsroom.domain.auth.model.identity import Anonymous
    from newsroom.domain.auth.model.principal import Principal
    from newsroom.domain.shared.error import (
        AuthenticationError,
        AuthorizationError,
        ConfigurationError,
    )

    if not isinstance(gate, Gate):
        raise ConfigurationError(f"Handler {handler_name} has no __auth__ declaration")

    if isinstance(gate, Public):
        return GateState.AUTHORIZED

    if isinstance(gate, AtLeast):
        if not isinstance(identity, Principal):
            state = (
                GateState.TOKEN_INVALID
                if isinstance(identity, Anonymous) and identity.reason
                else GateState.UNAUTHENTICATED
            )
            authz_logger.warning("handler=%s state=%s", handler_name, state)
            raise AuthenticationError("Authentication required")

        if not identity.has_role(gate.role):
            authz_logger.warning(
                "handler=%s state=%s user_id=%s role=%s required=%s",
                handler_name,
                GateState.FORBIDDEN,
                identity.user_id,
                identity.role.name,
                gate.role.name,
            )
            raise AuthorizationError("Access denied")

        authz_logger.debug(
            "handler=%s state=%s user_id=%s role=%s",
            handler_name,
            GateState.AUTHORIZED,
            identity.user_id,
            identity.role.name,
        )
        return GateState.AUTHORIZED

    raise ConfigurationError(  # pragma: no cover
        f"Handler {handler_name} has unhandled __auth__ type: {type(gate).__name__}"
    )
