"""Resource access policy for owned content (articles, comments).

Ownership is always sufficient. Beyond ownership, each resource type lists the
roles that may mutate other people's records, per operation.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Protocol

from newsroom.domain.auth.model.role import Role


class Operation(StrEnum):
    UPDATE = "update"
    DELETE = "delete"


class OwnedResource(Protocol):
    """Anything with an id and an immutable owner."""

    @property
    def id(self) -> Any: ...

    @property
    def owner_id(self) -> Any: ...


def can_mutate(
    actor_id: Any,
    actor_role: Role,
    resource_owner_id: Any,
    privileged_roles: Collection[Role],
) -> bool:
    """True if the actor owns the resource or holds one of privileged_roles."""
    if actor_id == resource_owner_id:
        return True
    return actor_role in privileged_roles


@dataclass(frozen=True)
class MutationRule:
    """Who besides the owner may perform one operation on one resource type.

    unconditional_roles bypass the ownership check entirely.
    """

    privileged_roles: frozenset[Role] = field(default_factory=frozenset)
    unconditional_roles: frozenset[Role] = field(default_factory=frozenset)

    def allows(self, actor_id: Any, actor_role: Role, resource_owner_id: Any) -> bool:
        if actor_role in self.unconditional_roles:
            return True
        return can_mutate(actor_id, actor_role, resource_owner_id, self.privileged_roles)


@dataclass(frozen=True)
class ResourcePolicy:
    name: str
    update: MutationRule
    delete: MutationRule

    def rule_for(self, operation: Operation) -> MutationRule:
        if operation == Operation.UPDATE:
            return self.update
        return self.delete


ARTICLE_POLICY = ResourcePolicy(
    name="article",
    update=MutationRule(privileged_roles=frozenset({Role.EDITOR, Role.ADMIN, Role.SUPER_ADMIN})),
    delete=MutationRule(privileged_roles=frozenset({Role.EDITOR, Role.ADMIN, Role.SUPER_ADMIN})),
)

# SUPER_ADMIN deletes any comment outright, while articles keep the plain
# ownership-or-role rule.
COMMENT_POLICY = ResourcePolicy(
    name="comment",
    update=MutationRule(privileged_roles=frozenset({Role.ADMIN, Role.EDITOR, Role.SUPER_ADMIN})),
    delete=MutationRule(
        privileged_roles=frozenset({Role.ADMIN, Role.EDITOR}),
        unconditional_roles=frozenset({Role.SUPER_ADMIN}),
    ),
)
