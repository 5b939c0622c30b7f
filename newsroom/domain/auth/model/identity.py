"""Request identities: who is making the current call."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Base for all request identities."""


@dataclass(frozen=True)
class Anonymous(Identity):
    """Unauthenticated request.

    reason records why a presented token was rejected ("invalid_token",
    "token_expired"); it is None when no token was presented. It is only
    ever logged, never returned to the client.
    """

    reason: str | None = None
