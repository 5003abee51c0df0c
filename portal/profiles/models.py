"""
Portal Profiles — Actor Profile
===============================
The durable authorization subject: role, permission matrix and
station access. Loaded once per session, immutable afterwards.
A profile edit by an administrator produces a new ActorProfile;
nothing holds on to the old one.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from portal.permissions.models import PermissionMatrix
from portal.profiles.errors import MalformedProfileError
from portal.roles.models import Role
from portal.stations.scope import StationAccess


@dataclass(frozen=True)
class ActorProfile:
    """
    role is None when the stored role is not one the portal knows.
    Such a profile ranks below Employee and fails every role requirement.
    """

    role: Optional[Role]
    permissions: PermissionMatrix = field(default_factory=PermissionMatrix)
    station_access: StationAccess = field(default_factory=StationAccess)
    email: str = ""

    def __post_init__(self):
        if self.role is not None and not isinstance(self.role, Role):
            raise ValueError("role must be a Role or None.")

        if not isinstance(self.permissions, PermissionMatrix):
            raise ValueError("permissions must be PermissionMatrix.")

        if not isinstance(self.station_access, StationAccess):
            raise ValueError("station_access must be StationAccess.")

        if not isinstance(self.email, str):
            raise ValueError("email must be a string.")

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ActorProfile":
        """
        Build a profile from a stored record.

        Accepted keys:
            role                    required, role label
            permissions             {module: {action: bool}} or its JSON text
                                    (detailed_permissions is an alias)
            station_access          "ALL", a station name or a list
                                    (station is an alias)
            email                   optional

        Raises MalformedProfileError for anything that cannot be read.
        """
        if not isinstance(record, Mapping):
            raise MalformedProfileError("profile record must be a mapping.")

        if "role" not in record:
            raise MalformedProfileError(
                "profile record is missing 'role'.", field_name="role"
            )
        raw_role = record["role"]
        if not isinstance(raw_role, (str, Role)):
            raise MalformedProfileError(
                "profile role must be a string.", field_name="role"
            )

        raw_permissions = record.get(
            "permissions", record.get("detailed_permissions")
        )
        if isinstance(raw_permissions, str):
            try:
                raw_permissions = json.loads(raw_permissions) if raw_permissions.strip() else None
            except json.JSONDecodeError as exc:
                raise MalformedProfileError(
                    "profile permissions are not valid JSON.",
                    field_name="permissions",
                ) from exc
        try:
            permissions = PermissionMatrix.from_mapping(raw_permissions)
        except ValueError as exc:
            raise MalformedProfileError(str(exc), field_name="permissions") from exc

        raw_stations = record.get("station_access", record.get("station"))
        try:
            station_access = StationAccess.parse(raw_stations)
        except ValueError as exc:
            raise MalformedProfileError(
                str(exc), field_name="station_access"
            ) from exc

        email = record.get("email") or ""
        if not isinstance(email, str):
            raise MalformedProfileError(
                "profile email must be a string.", field_name="email"
            )

        return cls(
            role=Role.from_label(raw_role),
            permissions=permissions,
            station_access=station_access,
            email=email.strip(),
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "role": None if self.role is None else self.role.label,
            "permissions": self.permissions.to_dict(),
            "station_access": self.station_access.to_value(),
        }
