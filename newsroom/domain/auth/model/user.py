"""User aggregate for the auth domain."""

from datetime import UTC, datetime

from pydantic import EmailStr

from newsroom.domain.auth.model.role import Role
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.shared.model.aggregate import Aggregate


class User(Aggregate):
    """A user account.

    Invariants:
    - `id` and `created_at` are immutable after creation
    - `email` is unique across all users
    - at most one user holds Role.SUPER_ADMIN, and that user is never deleted
    - `updated_at` is set on any modification
    """

    id: UserId
    email: EmailStr
    password_hash: str
    full_name: str
    avatar: str | None = None
    role: Role = Role.USER
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        email: str,
        password_hash: str,
        full_name: str,
        role: Role = Role.USER,
        avatar: str | None = None,
    ) -> "User":
        now = datetime.now(UTC)
        return cls(
            id=UserId.generate(),
            email=email.lower(),
            password_hash=password_hash,
            full_name=full_name,
            avatar=avatar,
            role=role,
            created_at=now,
            updated_at=now,
        )

    def update_profile(
        self,
        *,
        email: str | None = None,
        full_name: str | None = None,
        avatar: str | None = None,
    ) -> None:
        """Apply the supplied profile fields. Role is untouched."""
        if email is not None:
            self.email = email.lower()
        if full_name is not None:
            self.full_name = full_name
        if avatar is not None:
            self.avatar = avatar
        self.updated_at = datetime.now(UTC)

    def change_password_hash(self, password_hash: str) -> None:
        self.password_hash = password_hash
        self.updated_at = datetime.now(UTC)

    def change_role(self, role: Role) -> None:
        self.role = role
        self.updated_at = datetime.now(UTC)
