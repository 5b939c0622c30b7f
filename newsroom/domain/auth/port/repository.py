"""Repository ports for the auth domain."""

from abc import abstractmethod
from typing import Protocol

from newsroom.domain.auth.model.role import Role
from newsroom.domain.auth.model.user import User
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.shared.port import Port


class UserRepository(Port, Protocol):
    """Repository for User aggregate persistence.

    Unique violations (email, the single SUPER_ADMIN) surface as
    DuplicateIdentityError. Connection failures surface as StorageUnavailableError.
    """

    @abstractmethod
    async def get(self, user_id: UserId) -> User | None:
        """Get a user by ID."""
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email (case-insensitive)."""
        ...

    @abstractmethod
    async def list(self, role: Role | None = None) -> list[User]:
        """List users, newest first, optionally filtered by role."""
        ...

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert a new user."""
        ...

    @abstractmethod
    async def update(self, user: User) -> None:
        """Persist changes to an existing user."""
        ...

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user. Returns False if no such user."""
        ...

    @abstractmethod
    async def count_by_role(self, role: Role) -> int:
        """Count users holding exactly the given role."""
        ...
