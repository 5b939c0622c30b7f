"""Errors raised by the domain and infrastructure layers.

DomainError subclasses are caller mistakes or policy denials and become 4xx
responses; InfrastructureError subclasses mean the service itself cannot
proceed and become 503. The HTTP mapping lives in application/api/v1/errors.py.
"""


class NewsroomError(Exception):
    """Base class for all Newsroom errors."""

    default_code: str | None = None

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.default_code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain errors (4xx)
# =============================================================================


class DomainError(NewsroomError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""

    default_code = "not_found"


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class ConflictError(DomainError):
    """Resource already exists or unique constraint violated."""

    default_code = "conflict"


class DuplicateIdentityError(ConflictError):
    """A user with this email (or the single SUPER_ADMIN) already exists."""

    default_code = "duplicate_identity"


class AuthenticationError(DomainError):
    """Request could not be tied to a valid identity (401)."""

    default_code = "unauthenticated"


class InvalidCredentialsError(AuthenticationError):
    """Unknown email or wrong password. The two cases are indistinguishable."""

    default_code = "invalid_credentials"


class InvalidTokenError(AuthenticationError):
    """Token signature, audience or claims did not verify."""

    default_code = "invalid_token"


class ExpiredTokenError(AuthenticationError):
    """Token verified but its expiry has passed."""

    default_code = "token_expired"


class AuthorizationError(DomainError):
    """User not authorized for this operation."""

    default_code = "access_denied"


class ForbiddenRoleError(AuthorizationError):
    """Requested role may not be granted through this path."""

    default_code = "forbidden_role"


# =============================================================================
# Infrastructure errors (503)
# =============================================================================


class InfrastructureError(NewsroomError):
    """Base class for infrastructure/system errors."""


class StorageUnavailableError(InfrastructureError):
    """Storage backend (database) is unavailable."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
