"""Shared statement execution with storage-error translation."""

from typing import Any

from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.domain.shared.error import ConflictError, StorageUnavailableError


_FOREIGN_KEY_SQLSTATE = "23503"


def _is_foreign_key_violation(error: IntegrityError) -> bool:
    if getattr(error.orig, "sqlstate", None) == _FOREIGN_KEY_SQLSTATE:
        return True
    return "FOREIGN KEY" in str(error.orig).upper()


def _default_reference_message(stmt: Any) -> str:
    if getattr(stmt, "is_delete", False):
        return "Resource is still referenced"
    return "Referenced resource does not exist"


class SqlRepository:
    """Base for SQLAlchemy Core repositories bound to one request session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _execute(self, stmt: Any) -> Any:
        try:
            return await self.session.execute(stmt)
        except IntegrityError:
            raise
        except DBAPIError as e:
            raise StorageUnavailableError(f"Database error: {e.__class__.__name__}") from e

    async def _write(
        self,
        stmt: Any,
        conflict: type[ConflictError] = ConflictError,
        conflict_message: str = "Resource already exists",
        reference_message: str | None = None,
    ) -> Any:
        """Execute a write, turning unique violations into ``conflict``.

        Foreign-key violations always raise a plain ConflictError carrying
        ``reference_message``.
        """
        try:
            result = await self._execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            # The unit of work cannot continue past a constraint violation
            await self.session.rollback()
            if _is_foreign_key_violation(e):
                message = reference_message or _default_reference_message(stmt)
                raise ConflictError(message) from e
            raise conflict(conflict_message) from e
        return result
