"""Password hashing and verification (bcrypt)."""

import logging
from functools import cache

import bcrypt

from newsroom.domain.shared.error import ValidationError
from newsroom.domain.shared.service import Service

logger = logging.getLogger(__name__)

# bcrypt ignores (or rejects) input beyond this many bytes.
MAX_PASSWORD_BYTES = 72


@cache
def _dummy_hash(rounds: int) -> bytes:
    return bcrypt.hashpw(b"newsroom-dummy-password", bcrypt.gensalt(rounds))


class PasswordHasher(Service):
    """Salted adaptive hashing of user passwords.

    Neither the plaintext nor the hash is ever logged.
    """

    _rounds: int = 10

    def hash(self, plain_password: str) -> str:
        encoded = plain_password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes", field="password"
            )
        return bcrypt.hashpw(encoded, bcrypt.gensalt(self._rounds)).decode("ascii")

    def verify(self, plain_password: str, stored_hash: str) -> bool:
        """Compare a plaintext against a stored hash. Malformed hashes never verify."""
        try:
            return bcrypt.checkpw(plain_password.encode("utf-8"), stored_hash.encode("ascii"))
        except ValueError:
            logger.warning("Stored password hash is malformed or input too long")
            return False

    def verify_dummy(self, plain_password: str) -> None:
        """Spend the same work as verify() when there is no stored hash to check."""
        try:
            bcrypt.checkpw(plain_password.encode("utf-8"), _dummy_hash(self._rounds))
        except ValueError:
            pass
