"""Creation of the single SUPER_ADMIN account at startup."""

import logging

from newsroom.config import BootstrapConfig
from newsroom.domain.auth.model.role import Role
from newsroom.domain.auth.model.user import User
from newsroom.domain.auth.port.repository import UserRepository
from newsroom.domain.auth.service.password import PasswordHasher
from newsroom.domain.shared.error import DuplicateIdentityError
from newsroom.domain.shared.service import Service

logger = logging.getLogger(__name__)


class BootstrapService(Service):
    """The only code path that may create a SUPER_ADMIN.

    Storage holds a unique index over SUPER_ADMIN rows, so two processes
    bootstrapping at once cannot both succeed.
    """

    _user_repo: UserRepository
    _password_hasher: PasswordHasher
    _config: BootstrapConfig

    async def ensure_super_admin(self) -> User | None:
        """Create the SUPER_ADMIN if none exists. Idempotent.

        Returns:
            The created user, or None if one already existed or bootstrap is disabled
        """
        if await self._user_repo.count_by_role(Role.SUPER_ADMIN) > 0:
            logger.debug("SUPER_ADMIN already exists")
            return None

        if not self._config.super_admin_password:
            logger.warning("No SUPER_ADMIN exists and no bootstrap password is configured")
            return None

        user = User.create(
            email=self._config.super_admin_email,
            password_hash=self._password_hasher.hash(self._config.super_admin_password),
            full_name=self._config.super_admin_full_name,
            role=Role.SUPER_ADMIN,
        )
        try:
            await self._user_repo.save(user)
        except DuplicateIdentityError:
            logger.info("SUPER_ADMIN bootstrap lost a race or email is taken; skipping")
            return None

        logger.info("SUPER_ADMIN created: user_id=%s, email=%s", user.id, user.email)
        return user
