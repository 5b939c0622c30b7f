"""Principal: an authenticated identity with a role, resolved per request."""

from dataclasses import dataclass

from newsroom.domain.auth.model.identity import Identity
from newsroom.domain.auth.model.role import Role
from newsroom.domain.auth.model.value import UserId


@dataclass(frozen=True)
class Principal(Identity):
    """The authenticated identity of the current requester.

    Resolved per-request from the access token alone. Immutable after creation.
    Subclasses Identity so it can be used wherever Identity is expected.
    """

    user_id: UserId
    role: Role

    def has_role(self, role: Role) -> bool:
        """Check if the assigned role is >= the given role (hierarchy comparison)."""
        return self.role >= role

    def is_self(self, user_id: UserId) -> bool:
        return self.user_id == user_id
