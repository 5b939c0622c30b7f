"""User management and self-service profile operations."""

import logging

from newsroom.domain.auth.model.principal import Principal
from newsroom.domain.auth.model.role import Role
from newsroom.domain.auth.model.user import User
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.auth.port.repository import UserRepository
from newsroom.domain.auth.service.authorization import AuthorizationGate
from newsroom.domain.auth.service.password import PasswordHasher
from newsroom.domain.shared.error import DuplicateIdentityError, NotFoundError
from newsroom.domain.shared.service import Service

logger = logging.getLogger(__name__)


class UserService(Service):
    """Administrative CRUD over user accounts plus the caller's own profile.

    Every mutation is cleared by the AuthorizationGate before anything is written.
    """

    _user_repo: UserRepository
    _password_hasher: PasswordHasher
    _gate: AuthorizationGate

    async def _get_or_404(self, user_id: UserId) -> User:
        user = await self._user_repo.get(user_id)
        if user is None:
            raise NotFoundError(f"User not found: {user_id}")
        return user

    async def _ensure_email_free(self, email: str, owner: UserId | None = None) -> None:
        existing = await self._user_repo.get_by_email(email.lower())
        if existing is not None and existing.id != owner:
            raise DuplicateIdentityError("User with this email already exists")

    async def create_user(
        self,
        principal: Principal,
        email: str,
        full_name: str,
        password: str,
        role: Role = Role.USER,
        avatar: str | None = None,
    ) -> User:
        self._gate.authorize_user_creation(principal, role)
        await self._ensure_email_free(email)

        user = User.create(
            email=email,
            password_hash=self._password_hasher.hash(password),
            full_name=full_name,
            role=role,
            avatar=avatar,
        )
        await self._user_repo.save(user)
        logger.info(
            "User created: user_id=%s, role=%s, by=%s", user.id, role.name, principal.user_id
        )
        return user

    async def list_users(self, role: Role | None = None) -> list[User]:
        return await self._user_repo.list(role=role)

    async def get_user(self, user_id: UserId) -> User:
        return await self._get_or_404(user_id)

    async def update_user(
        self,
        principal: Principal,
        user_id: UserId,
        *,
        email: str | None = None,
        full_name: str | None = None,
        avatar: str | None = None,
        password: str | None = None,
        role: Role | None = None,
    ) -> User:
        """Apply an administrative update.

        The role-change rules apply when ``role`` differs from the current one,
        and to any ``role`` in an update of the caller's own account.
        """
        target = await self._get_or_404(user_id)
        new_role = None
        if role is not None and (role != target.role or principal.is_self(target.id)):
            new_role = role
        self._gate.authorize_user_update(principal, target, new_role)

        if email is not None and email.lower() != target.email:
            await self._ensure_email_free(email, owner=target.id)

        target.update_profile(email=email, full_name=full_name, avatar=avatar)
        if password is not None:
            target.change_password_hash(self._password_hasher.hash(password))
        if new_role is not None:
            target.change_role(new_role)
            logger.info(
                "Role changed: user_id=%s, role=%s, by=%s",
                target.id,
                new_role.name,
                principal.user_id,
            )

        await self._user_repo.update(target)
        return target

    async def delete_user(self, principal: Principal, user_id: UserId) -> None:
        target = await self._get_or_404(user_id)
        self._gate.authorize_user_deletion(principal, target)
        await self._user_repo.delete(target.id)
        logger.info("User deleted: user_id=%s, by=%s", target.id, principal.user_id)

    async def get_profile(self, principal: Principal) -> User:
        return await self._get_or_404(principal.user_id)

    async def update_profile(
        self,
        principal: Principal,
        *,
        email: str | None = None,
        full_name: str | None = None,
        avatar: str | None = None,
        password: str | None = None,
    ) -> User:
        """Edit the caller's own account. The role is never touched here."""
        user = await self._get_or_404(principal.user_id)

        if email is not None and email.lower() != user.email:
            await self._ensure_email_free(email, owner=user.id)

        user.update_profile(email=email, full_name=full_name, avatar=avatar)
        if password is not None:
            user.change_password_hash(self._password_hasher.hash(password))

        await self._user_repo.update(user)
        return user
