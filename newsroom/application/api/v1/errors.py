"""Centralized error transformation for API routes.

Maps Newsroom errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException

from newsroom.domain.shared.error import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InvalidCredentialsError,
    NewsroomError,
    NotFoundError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    ValidationError: 422,
    ConflictError: 409,
    AuthenticationError: 401,
    AuthorizationError: 403,
}

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def _domain_status(error: DomainError) -> int:
    for cls in type(error).__mro__:
        if cls in DOMAIN_ERROR_STATUS_MAP:
            return DOMAIN_ERROR_STATUS_MAP[cls]
    return 400


def map_newsroom_error(error: NewsroomError) -> HTTPException:
    """Map a Newsroom error to an HTTPException.

    401 and 403 bodies stay coarse: token failures all read "unauthenticated"
    and policy denials never say which check failed.
    """
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, InfrastructureError):
        # Infrastructure errors → 503 Service Unavailable
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, AuthenticationError):
        if not isinstance(error, InvalidCredentialsError):
            detail = {"code": "unauthenticated", "message": "Authentication required"}
        return HTTPException(status_code=401, detail=detail, headers=_BEARER_CHALLENGE)

    if isinstance(error, AuthorizationError):
        return HTTPException(status_code=403, detail={"code": error.code, "message": "Access denied"})

    if isinstance(error, DomainError):
        if isinstance(error, ValidationError) and error.field is not None:
            detail["field"] = error.field
        return HTTPException(status_code=_domain_status(error), detail=detail)

    # Fallback for unknown NewsroomError subclasses
    return HTTPException(status_code=500, detail=detail)
