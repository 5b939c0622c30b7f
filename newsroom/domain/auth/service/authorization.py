"""Authorization gate: turns tokens into identities and enforces the access policies.

Every denial raises the same generic AuthorizationError; the specific failing
check is only written to the ``newsroom.authz`` log.
"""

from newsroom.domain.auth.model.identity import Anonymous, Identity
from newsroom.domain.auth.model.principal import Principal
from newsroom.domain.auth.model.role import Role
from newsroom.domain.auth.model.user import User
from newsroom.domain.auth.service.token import TokenService
from newsroom.domain.shared.authorization.gate import GateState, authz_logger
from newsroom.domain.shared.authorization.hierarchy import (
    assignable_roles,
    can_assign_role,
    can_change_role,
    can_delete_identity,
    can_modify_identity,
)
from newsroom.domain.shared.authorization.resource import (
    Operation,
    OwnedResource,
    ResourcePolicy,
)
from newsroom.domain.shared.error import (
    AuthenticationError,
    AuthorizationError,
    ForbiddenRoleError,
)
from newsroom.domain.shared.service import Service

_DENIED = "Access denied"


def _deny(check: str, principal: Principal, **facts: object) -> AuthorizationError:
    details = " ".join(f"{k}={v}" for k, v in facts.items())
    authz_logger.warning(
        "state=%s check=%s user_id=%s role=%s %s",
        GateState.FORBIDDEN,
        check,
        principal.user_id,
        principal.role.name,
        details,
    )
    return AuthorizationError(_DENIED)


def _allow(check: str, principal: Principal) -> None:
    authz_logger.info(
        "state=%s check=%s user_id=%s role=%s",
        GateState.AUTHORIZED,
        check,
        principal.user_id,
        principal.role.name,
    )


class AuthorizationGate(Service):
    """Single enforcement point for protected operations.

    Keeps no state between requests: the identity is rebuilt from the token
    every time and every decision takes its facts as arguments.
    """

    _token_service: TokenService

    def identify(self, token: str | None) -> Identity:
        """Resolve the request identity from a bearer token.

        Returns Anonymous when there is no token or it fails verification,
        a Principal otherwise. The role is taken from the token as issued.
        """
        if not token:
            return Anonymous()

        try:
            claims = self._token_service.verify(token)
        except AuthenticationError as e:
            authz_logger.info("state=%s reason=%s", GateState.TOKEN_INVALID, e.code)
            return Anonymous(reason=e.code)

        authz_logger.debug(
            "state=%s user_id=%s role=%s", GateState.IDENTIFIED, claims.sub, claims.role.name
        )
        return Principal(user_id=claims.sub, role=claims.role)

    def authorize_mutation(
        self,
        principal: Principal,
        resource: OwnedResource,
        operation: Operation,
        policy: ResourcePolicy,
    ) -> None:
        """Allow the owner or a privileged role to update/delete an owned resource."""
        check = f"{policy.name}.{operation}"
        rule = policy.rule_for(operation)
        if not rule.allows(principal.user_id, principal.role, resource.owner_id):
            raise _deny(check, principal, resource_id=resource.id, owner_id=resource.owner_id)
        _allow(check, principal)

    def authorize_user_creation(self, principal: Principal, target_role: Role) -> None:
        """Allow provisioning an account of target_role according to the role hierarchy."""
        if not can_assign_role(principal.role, target_role):
            authz_logger.warning(
                "state=%s check=user.create user_id=%s role=%s target_role=%s assignable=%s",
                GateState.FORBIDDEN,
                principal.user_id,
                principal.role.name,
                target_role.name,
                ",".join(r.name for r in sorted(assignable_roles(principal.role))),
            )
            raise ForbiddenRoleError(_DENIED)
        _allow("user.create", principal)

    def authorize_user_update(
        self,
        principal: Principal,
        target: User,
        new_role: Role | None = None,
    ) -> None:
        """Allow editing target; new_role is given when the update touches the role."""
        if not can_modify_identity(principal.role, target.role):
            raise _deny("user.modify", principal, target_id=target.id, target_role=target.role.name)

        if new_role is not None and not can_change_role(
            principal.role,
            target.role,
            new_role,
            is_self=principal.is_self(target.id),
        ):
            raise _deny(
                "user.change_role",
                principal,
                target_id=target.id,
                target_role=target.role.name,
                new_role=new_role.name,
            )
        _allow("user.update", principal)

    def authorize_user_deletion(self, principal: Principal, target: User) -> None:
        if not can_delete_identity(target.role, is_self=principal.is_self(target.id)):
            raise _deny("user.delete", principal, target_id=target.id, target_role=target.role.name)
        _allow("user.delete", principal)
