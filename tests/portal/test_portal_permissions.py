"""
Tests for portal.permissions — matrix, default-deny lookups and presets.
"""

import pytest

from portal.permissions import (
    ACTION_CREATE,
    ACTION_DELETE,
    ACTION_EDIT,
    ACTION_VIEW,
    KNOWN_MODULES,
    PermissionMatrix,
    default_permissions_for,
    has_any_permission,
    has_permission,
)
from portal.profiles import ActorProfile
from portal.roles import Role


def _profile(mapping) -> ActorProfile:
    return ActorProfile(
        role=Role.EMPLOYEE, permissions=PermissionMatrix.from_mapping(mapping)
    )


# ── PermissionMatrix ─────────────────────────────────────────

class TestPermissionMatrix:
    def test_only_true_grants(self):
        matrix = PermissionMatrix.from_mapping(
            {"sales": {"view": True, "create": "true", "edit": 1, "delete": False}}
        )
        assert matrix.allows("sales", "view")
        assert not matrix.allows("sales", "create")
        assert not matrix.allows("sales", "edit")
        assert not matrix.allows("sales", "delete")

    def test_none_is_empty(self):
        assert PermissionMatrix.from_mapping(None).grants == frozenset()

    def test_non_mapping_rejected(self):
        with pytest.raises(ValueError):
            PermissionMatrix.from_mapping(["sales"])

    def test_malformed_module_entries_skipped(self):
        matrix = PermissionMatrix.from_mapping(
            {"sales": "all", "orders": {"view": True}}
        )
        assert matrix.modules() == ("orders",)

    def test_rejects_bad_grants(self):
        with pytest.raises(ValueError):
            PermissionMatrix(grants=frozenset({("sales",)}))

    def test_to_dict_spells_out_actions(self):
        matrix = PermissionMatrix.from_mapping({"sales": {"view": True}})
        assert matrix.to_dict() == {
            "sales": {"view": True, "create": False, "edit": False, "delete": False}
        }

    def test_granted_actions(self):
        matrix = PermissionMatrix.from_mapping(
            {"sales": {"view": True, "edit": True}}
        )
        assert matrix.granted_actions("sales") == ("edit", "view")


# ── Lookups ──────────────────────────────────────────────────

class TestHasPermission:
    def test_granted(self):
        assert has_permission(_profile({"sales": {"view": True}}), "sales", "view")

    def test_missing_module(self):
        assert not has_permission(_profile({"sales": {"view": True}}), "orders", "view")

    def test_missing_action(self):
        assert not has_permission(_profile({"sales": {"view": True}}), "sales", "edit")

    def test_no_parent_inheritance(self):
        profile = _profile({"reports": {"view": True}})
        assert not has_permission(profile, "reports.sales", "view")

    def test_profile_without_matrix(self):
        assert not has_permission(None, "sales", "view")
        assert not has_permission(object(), "sales", "view")

    def test_non_string_arguments(self):
        assert not has_permission(_profile({"sales": {"view": True}}), None, "view")

    def test_has_any_permission(self):
        profile = _profile({"sales": {"edit": True}})
        assert has_any_permission(profile, "sales")
        assert not has_any_permission(profile, "orders")


# ── Role Presets ─────────────────────────────────────────────

class TestDefaultPermissions:
    def test_administrator_gets_everything(self):
        matrix = default_permissions_for(Role.ADMINISTRATOR)
        for module in KNOWN_MODULES:
            for action in (ACTION_VIEW, ACTION_CREATE, ACTION_EDIT, ACTION_DELETE):
                assert matrix.allows(module, action)

    def test_management_cannot_delete(self):
        matrix = default_permissions_for(Role.MANAGEMENT)
        assert matrix.allows("sales", ACTION_EDIT)
        assert not any(action == ACTION_DELETE for _, action in matrix.grants)

    def test_employee_is_limited(self):
        matrix = default_permissions_for(Role.EMPLOYEE)
        assert matrix.allows("sales", ACTION_CREATE)
        assert not matrix.allows("employees", ACTION_VIEW)
        assert not matrix.allows("products", ACTION_EDIT)

    def test_non_role_gets_nothing(self):
        assert default_permissions_for("Administrator").grants == frozenset()
