"""Token service for JWT creation and validation."""

import logging
from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt

from newsroom.config import JwtConfig
from newsroom.domain.auth.model.role import Role
from newsroom.domain.auth.model.value import TokenClaims, UserId
from newsroom.domain.shared.error import (
    ConfigurationError,
    ExpiredTokenError,
    InvalidTokenError,
)
from newsroom.domain.shared.service import Service

logger = logging.getLogger(__name__)

AUDIENCE = "authenticated"
_REQUIRED_CLAIMS = ["sub", "role", "iat", "exp", "aud"]


class TokenService(Service):
    """Issues and verifies stateless HS256 access tokens.

    A token's validity is its signature and expiry only; nothing is stored
    server-side and there is no revocation.
    """

    _config: JwtConfig

    def _secret(self) -> str:
        if not self._config.secret:
            raise ConfigurationError("JWT signing secret is not configured")
        return self._config.secret

    def issue(self, user_id: UserId, role: Role) -> str:
        """Create a signed access token carrying the subject and role.

        Args:
            user_id: The user's ID, stored as ``sub``
            role: The user's role, stored by name

        Returns:
            Encoded JWT string

        Raises:
            ConfigurationError: If no signing secret is configured
        """
        secret = self._secret()
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._config.access_token_expire_minutes)

        payload = {
            "sub": str(user_id),
            "role": role.name,
            "aud": AUDIENCE,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }

        return jwt.encode(payload, secret, algorithm=self._config.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Validate and decode an access token.

        Raises:
            ExpiredTokenError: If the signature is good but the token has expired
            InvalidTokenError: If the signature, audience or claims are bad
        """
        secret = self._secret()
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._config.algorithm],
                audience=AUDIENCE,
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError("Invalid token") from e

        try:
            user_id = UserId(UUID(payload["sub"]))
            role = Role[payload["role"]]
            issued_at = datetime.fromtimestamp(payload["iat"], UTC)
            expires_at = datetime.fromtimestamp(payload["exp"], UTC)
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise InvalidTokenError("Invalid token claims") from e

        return TokenClaims(sub=user_id, role=role, issued_at=issued_at, expires_at=expires_at)

    @property
    def access_token_expire_seconds(self) -> int:
        """Get access token expiry in seconds."""
        return self._config.access_token_expire_minutes * 60
