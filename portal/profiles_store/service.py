"""
Portal Profiles Store - Service Layer
=====================================
DB-backed profile and role CRUD used by admin screens and bootstrap.

Writes go straight to the row; readers (DbProfileProvider) always hit
the table, so a role change takes effect on the next decision.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from django.db import transaction

from portal.permissions.defaults import default_permissions_for
from portal.permissions.models import PermissionMatrix
from portal.profiles_store.models import RoleDefinition, UserProfile
from portal.roles.models import Role, resolve_role_code
from portal.stations.scope import StationAccess

DEFAULT_ROLE_DEFINITIONS: tuple[dict[str, str], ...] = (
    {
        "role_name": "Administrator",
        "role_code": "Administrator",
        "description": "Full access to every module and station.",
    },
    {
        "role_name": "Management",
        "role_code": "Management",
        "description": "Runs station operations; cannot delete records.",
    },
    {
        "role_name": "Employee",
        "role_code": "Employee",
        "description": "Day-to-day sales and delivery entry.",
    },
)


def _clean_email(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("email must be a non-empty string.")
    return value.strip().lower()


def _coerce_role(role: Role | str) -> Role:
    if isinstance(role, Role):
        return role
    resolved = Role.from_label(role)
    if resolved is None:
        raise ValueError(
            f"role '{role}' not valid. "
            f"Must be one of: {[member.label for member in Role]}"
        )
    return resolved


def serialize_profile(profile: UserProfile) -> dict[str, Any]:
    return {
        "email": profile.email,
        "role": profile.role,
        "station_access": profile.station_access,
        "detailed_permissions": profile.detailed_permissions,
        "employee_id": profile.employee_id,
        "is_active": profile.is_active,
    }


@transaction.atomic
def upsert_profile(
    *,
    email: str,
    role: Role | str,
    station_access: Any,
    permissions: Mapping[str, Mapping[str, bool]] | None = None,
    employee_id: str = "",
) -> UserProfile:
    """
    Create or replace a user profile.

    Without an explicit permission mapping the role preset is stored.
    """
    canonical_email = _clean_email(email)
    canonical_role = _coerce_role(role)
    access = StationAccess.parse(station_access)

    if permissions is None:
        matrix = default_permissions_for(canonical_role)
    else:
        matrix = PermissionMatrix.from_mapping(permissions)

    profile, _ = UserProfile.objects.update_or_create(
        email=canonical_email,
        defaults={
            "role": canonical_role.label,
            "station_access": access.to_value(),
            "detailed_permissions": matrix.to_dict(),
            "employee_id": employee_id or "",
            "is_active": True,
        },
    )
    return profile


def change_role(*, email: str, role: Role | str, reset_permissions: bool = False) -> UserProfile:
    profile = UserProfile.objects.get(email=_clean_email(email))
    canonical_role = _coerce_role(role)
    profile.role = canonical_role.label
    update_fields = ["role", "updated_at"]
    if reset_permissions:
        profile.detailed_permissions = default_permissions_for(canonical_role).to_dict()
        update_fields.append("detailed_permissions")
    profile.save(update_fields=update_fields)
    return profile


def deactivate_profile(*, email: str) -> UserProfile:
    profile = UserProfile.objects.get(email=_clean_email(email))
    profile.is_active = False
    profile.save(update_fields=["is_active", "updated_at"])
    return profile


@transaction.atomic
def bootstrap_roles(
    definitions: Iterable[Mapping[str, str]] = DEFAULT_ROLE_DEFINITIONS,
) -> tuple[RoleDefinition, ...]:
    rows = []
    for definition in definitions:
        row, _ = RoleDefinition.objects.update_or_create(
            role_code=definition["role_code"],
            defaults={
                "role_name": definition["role_name"],
                "description": definition.get("description", ""),
            },
        )
        rows.append(row)
    return tuple(rows)


def role_for_definition(row: RoleDefinition) -> Role:
    return resolve_role_code(row.role_code)
