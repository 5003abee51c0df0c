from __future__ import annotations

import pytest

from portal.permissions import ACTION_DELETE, ACTION_VIEW
from portal.profiles import DbProfileProvider
from portal.profiles_store.models import RoleDefinition, UserProfile
from portal.profiles_store.service import (
    bootstrap_roles,
    change_role,
    deactivate_profile,
    role_for_definition,
    serialize_profile,
    upsert_profile,
)
from portal.roles import Role
from portal.stations import StationAccess

pytestmark = pytest.mark.django_db(transaction=True)


def test_upsert_profile_stores_role_preset_and_provider_reads_it() -> None:
    upsert_profile(email="Ana@Example.com", role="Management", station_access=["North"])

    profile = DbProfileProvider().get_profile("ana@example.com")

    assert profile is not None
    assert profile.role is Role.MANAGEMENT
    assert profile.email == "ana@example.com"
    assert profile.station_access == StationAccess.only("North")
    assert profile.permissions.allows("sales", ACTION_VIEW)
    assert not profile.permissions.allows("sales", ACTION_DELETE)


def test_explicit_permissions_override_preset() -> None:
    upsert_profile(
        email="ben@example.com",
        role=Role.EMPLOYEE,
        station_access="ALL",
        permissions={"orders": {"view": True, "delete": "yes"}},
    )

    row = UserProfile.objects.get(email="ben@example.com")
    assert row.station_access == "ALL"
    assert row.detailed_permissions["orders"]["view"] is True
    assert row.detailed_permissions["orders"]["delete"] is False

    profile = DbProfileProvider().get_profile("BEN@example.com")
    assert profile.station_access.universal is True
    assert profile.permissions.modules() == ("orders",)


def test_upsert_rejects_unknown_role() -> None:
    with pytest.raises(ValueError, match="role"):
        upsert_profile(email="c@example.com", role="Owner", station_access=[])


def test_role_change_is_visible_on_next_lookup() -> None:
    upsert_profile(email="ana@example.com", role=Role.ADMINISTRATOR, station_access="ALL")
    provider = DbProfileProvider()
    assert provider.get_profile("ana@example.com").role is Role.ADMINISTRATOR

    change_role(email="ana@example.com", role="Employee", reset_permissions=True)

    profile = provider.get_profile("ana@example.com")
    assert profile.role is Role.EMPLOYEE
    assert not profile.permissions.allows("users", ACTION_VIEW)


def test_inactive_and_missing_profiles_are_absent() -> None:
    upsert_profile(email="gone@example.com", role="Employee", station_access=[])
    deactivate_profile(email="gone@example.com")

    provider = DbProfileProvider()
    assert provider.get_profile("gone@example.com") is None
    assert provider.get_profile("never@example.com") is None
    assert provider.get_profile("") is None


def test_malformed_row_is_absent() -> None:
    UserProfile.objects.create(
        email="bad@example.com",
        role="Employee",
        station_access=["ALL", "North"],
        detailed_permissions={},
    )

    assert DbProfileProvider().get_profile("bad@example.com") is None


def test_unknown_stored_role_loads_without_privilege() -> None:
    UserProfile.objects.create(email="odd@example.com", role="Owner")

    profile = DbProfileProvider().get_profile("odd@example.com")

    assert profile is not None
    assert profile.role is None


def test_serialize_profile() -> None:
    row = upsert_profile(
        email="ana@example.com", role="Employee", station_access="North",
        employee_id="E-17",
    )

    data = serialize_profile(row)

    assert data["email"] == "ana@example.com"
    assert data["role"] == "Employee"
    assert data["station_access"] == ["North"]
    assert data["employee_id"] == "E-17"
    assert data["is_active"] is True


def test_bootstrap_roles_is_idempotent_and_lists_options() -> None:
    bootstrap_roles()
    bootstrap_roles()
    RoleDefinition.objects.create(role_name="Supervisor", role_code="Supervisor")

    options = DbProfileProvider().list_role_options()

    assert RoleDefinition.objects.count() == 4
    assert [option.role_code for option in options] == [
        "Administrator",
        "Management",
        "Employee",
        "Supervisor",
    ]
    assert options[-1].role is Role.EMPLOYEE
    assert options[-1].is_recognized() is False
    assert role_for_definition(RoleDefinition.objects.get(role_code="Management")) is (
        Role.MANAGEMENT
    )
