"""Role hierarchy policy: which roles may provision, change and delete which.

Every function here is pure. Decisions depend only on the arguments, so the
same inputs always yield the same answer.
"""

from types import MappingProxyType
from typing import Mapping

from newsroom.domain.auth.model.role import Role

ROLE_HIERARCHY: Mapping[Role, frozenset[Role]] = MappingProxyType(
    {
        Role.SUPER_ADMIN: frozenset({Role.ADMIN, Role.EDITOR, Role.REPORTER, Role.USER}),
        Role.ADMIN: frozenset({Role.EDITOR, Role.REPORTER, Role.USER}),
        Role.EDITOR: frozenset({Role.REPORTER, Role.USER}),
        Role.REPORTER: frozenset(),
        Role.USER: frozenset(),
    }
)


def assignable_roles(actor_role: Role) -> frozenset[Role]:
    """Roles the actor may grant when provisioning an account."""
    return ROLE_HIERARCHY.get(actor_role, frozenset()) - {Role.SUPER_ADMIN}


def can_assign_role(actor_role: Role, target_role: Role) -> bool:
    """Whether actor_role may create an account holding target_role.

    SUPER_ADMIN is never assignable, whoever the actor is.
    """
    if target_role == Role.SUPER_ADMIN:
        return False
    return target_role in ROLE_HIERARCHY.get(actor_role, frozenset())


def can_change_role(
    actor_role: Role,
    existing_target_role: Role,
    new_target_role: Role,
    is_self: bool,
) -> bool:
    """Whether actor_role may move an account from existing_target_role to new_target_role."""
    if actor_role != Role.SUPER_ADMIN:
        return False
    if existing_target_role == Role.SUPER_ADMIN:
        return False
    if is_self:
        return False
    if new_target_role == Role.SUPER_ADMIN:
        return False
    return True


def can_delete_identity(target_role: Role, is_self: bool) -> bool:
    """Whether an account may be deleted at all.

    Independent of the actor: the delete operation is already gated to SUPER_ADMIN.
    """
    if target_role == Role.SUPER_ADMIN:
        return False
    return not is_self


def can_modify_identity(actor_role: Role, target_role: Role) -> bool:
    """Whether actor_role may edit any field of an account holding target_role."""
    if target_role == Role.SUPER_ADMIN:
        return actor_role == Role.SUPER_ADMIN
    return True
