"""Value objects for the auth domain."""

from dataclasses import dataclass
from datetime import datetime

from newsroom.domain.auth.model.role import Role
from newsroom.domain.shared.model.value import EntityId


class UserId(EntityId):
    """Identifier of a user account. Carried in tokens as ``sub``."""


@dataclass(frozen=True)
class TokenClaims:
    """Verified contents of an access token."""

    sub: UserId
    role: Role
    issued_at: datetime
    expires_at: datetime
