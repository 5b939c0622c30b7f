"""SQL repository implementation for users."""

from uuid import UUID

from sqlalchemy import delete, func, insert, select, update

from newsroom.domain.auth.model.role import Role
from newsroom.domain.auth.model.user import User
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.auth.port.repository import UserRepository
from newsroom.domain.shared.error import DuplicateIdentityError
from newsroom.infrastructure.persistence.repository.base import SqlRepository
from newsroom.infrastructure.persistence.tables import users_table


def _row_to_user(row: dict) -> User:
    """Convert a database row to a User model."""
    return User(
        id=UserId(UUID(row["id"])),
        email=row["email"],
        password_hash=row["password_hash"],
        full_name=row["full_name"],
        avatar=row["avatar"],
        role=Role[row["role"]],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _user_to_dict(user: User) -> dict:
    """Convert a User model to a database row dict."""
    return {
        "id": str(user.id),
        "email": user.email.lower(),
        "password_hash": user.password_hash,
        "full_name": user.full_name,
        "avatar": user.avatar,
        "role": user.role.name,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


class SqlUserRepository(SqlRepository, UserRepository):
    """SQL implementation of UserRepository."""

    async def get(self, user_id: UserId) -> User | None:
        stmt = select(users_table).where(users_table.c.id == str(user_id))
        result = await self._execute(stmt)
        row = result.mappings().first()
        return _row_to_user(dict(row)) if row else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(users_table).where(users_table.c.email == email.lower())
        result = await self._execute(stmt)
        row = result.mappings().first()
        return _row_to_user(dict(row)) if row else None

    async def list(self, role: Role | None = None) -> list[User]:
        stmt = select(users_table).order_by(users_table.c.created_at.desc())
        if role is not None:
            stmt = stmt.where(users_table.c.role == role.name)
        result = await self._execute(stmt)
        return [_row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> None:
        await self._write(
            insert(users_table).values(**_user_to_dict(user)),
            conflict=DuplicateIdentityError,
            conflict_message="User with this email already exists",
        )

    async def update(self, user: User) -> None:
        user_dict = _user_to_dict(user)
        del user_dict["id"], user_dict["created_at"]
        await self._write(
            update(users_table).where(users_table.c.id == str(user.id)).values(**user_dict),
            conflict=DuplicateIdentityError,
            conflict_message="User with this email already exists",
        )

    async def delete(self, user_id: UserId) -> bool:
        result = await self._write(delete(users_table).where(users_table.c.id == str(user_id)))
        return result.rowcount > 0

    async def count_by_role(self, role: Role) -> int:
        stmt = select(func.count()).select_from(users_table).where(users_table.c.role == role.name)
        result = await self._execute(stmt)
        return int(result.scalar_one())
