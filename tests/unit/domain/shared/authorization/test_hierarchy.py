"""Tests for the role hierarchy policy functions."""

import itertools

import pytest

from newsroom.domain.auth.model.role import Role
from newsroom.domain.shared.authorization.hierarchy import (
    ROLE_HIERARCHY,
    assignable_roles,
    can_assign_role,
    can_change_role,
    can_delete_identity,
    can_modify_identity,
)


class TestCanAssignRole:
    @pytest.mark.parametrize("actor", list(Role))
    def test_super_admin_is_never_assignable(self, actor: Role) -> None:
        assert can_assign_role(actor, Role.SUPER_ADMIN) is False

    def test_super_admin_can_assign_admin(self) -> None:
        assert can_assign_role(Role.SUPER_ADMIN, Role.ADMIN) is True

    def test_admin_can_assign_editor_and_below(self) -> None:
        assert can_assign_role(Role.ADMIN, Role.EDITOR) is True
        assert can_assign_role(Role.ADMIN, Role.REPORTER) is True
        assert can_assign_role(Role.ADMIN, Role.USER) is True

    def test_admin_cannot_assign_admin(self) -> None:
        assert can_assign_role(Role.ADMIN, Role.ADMIN) is False

    def test_editor_can_assign_reporter(self) -> None:
        assert can_assign_role(Role.EDITOR, Role.REPORTER) is True
        assert can_assign_role(Role.EDITOR, Role.EDITOR) is False

    @pytest.mark.parametrize("target", list(Role))
    def test_reporter_and_user_assign_nothing(self, target: Role) -> None:
        assert can_assign_role(Role.REPORTER, target) is False
        assert can_assign_role(Role.USER, target) is False

    def test_pairs_outside_table_are_denied(self) -> None:
        for actor, target in itertools.product(Role, Role):
            allowed = target in ROLE_HIERARCHY[actor] and target != Role.SUPER_ADMIN
            assert can_assign_role(actor, target) is allowed

    def test_repeated_calls_give_identical_results(self) -> None:
        results = {can_assign_role(Role.ADMIN, Role.EDITOR) for _ in range(50)}
        assert results == {True}


class TestAssignableRoles:
    def test_super_admin_assignable_set_excludes_itself(self) -> None:
        assert assignable_roles(Role.SUPER_ADMIN) == {
            Role.ADMIN,
            Role.EDITOR,
            Role.REPORTER,
            Role.USER,
        }

    def test_user_has_no_assignable_roles(self) -> None:
        assert assignable_roles(Role.USER) == frozenset()

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            ROLE_HIERARCHY[Role.USER] = frozenset({Role.ADMIN})  # type: ignore[index]


class TestCanChangeRole:
    def test_super_admin_changes_admin_to_editor(self) -> None:
        assert can_change_role(Role.SUPER_ADMIN, Role.ADMIN, Role.EDITOR, is_self=False) is True

    def test_super_admin_target_is_immutable(self) -> None:
        assert (
            can_change_role(Role.SUPER_ADMIN, Role.SUPER_ADMIN, Role.ADMIN, is_self=False) is False
        )

    def test_admin_cannot_change_roles(self) -> None:
        assert can_change_role(Role.ADMIN, Role.EDITOR, Role.USER, is_self=False) is False

    def test_no_self_role_change(self) -> None:
        assert can_change_role(Role.SUPER_ADMIN, Role.ADMIN, Role.USER, is_self=True) is False

    def test_cannot_promote_to_super_admin(self) -> None:
        assert (
            can_change_role(Role.SUPER_ADMIN, Role.ADMIN, Role.SUPER_ADMIN, is_self=False) is False
        )


class TestCanDeleteIdentity:
    def test_super_admin_is_never_deleted(self) -> None:
        assert can_delete_identity(Role.SUPER_ADMIN, is_self=False) is False

    def test_no_self_deletion(self) -> None:
        assert can_delete_identity(Role.USER, is_self=True) is False

    def test_other_user_may_be_deleted(self) -> None:
        assert can_delete_identity(Role.USER, is_self=False) is True


class TestCanModifyIdentity:
    @pytest.mark.parametrize("actor", [Role.ADMIN, Role.EDITOR, Role.USER])
    def test_only_super_admin_touches_super_admin(self, actor: Role) -> None:
        assert can_modify_identity(actor, Role.SUPER_ADMIN) is False
        assert can_modify_identity(Role.SUPER_ADMIN, Role.SUPER_ADMIN) is True

    def test_admin_may_modify_editor(self) -> None:
        assert can_modify_identity(Role.ADMIN, Role.EDITOR) is True
