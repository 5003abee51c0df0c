"""
Portal Authorization — Access Request
=====================================
What a route or action needs. Every field is optional; an empty
request only asks for a valid session.

  required_permission / required_permissions   all must be granted
  required_station                             that exact station
  allowed_stations                             any one of them
  require_all_stations                         the "ALL" sentinel
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from portal.permissions.constants import VALID_ACTIONS
from portal.roles.models import Role


@dataclass(frozen=True)
class RequiredPermission:
    module: str
    action: str

    def __post_init__(self):
        if not self.module or not isinstance(self.module, str):
            raise ValueError("module must be a non-empty string.")

        if self.action not in VALID_ACTIONS:
            raise ValueError(
                f"action '{self.action}' not valid. "
                f"Must be one of: {list(VALID_ACTIONS)}"
            )

    @classmethod
    def coerce(cls, value) -> "RequiredPermission":
        """Accept a RequiredPermission or a (module, action) pair."""
        if isinstance(value, RequiredPermission):
            return value
        if isinstance(value, tuple) and len(value) == 2:
            return cls(module=value[0], action=value[1])
        raise ValueError("permissions must be (module, action) pairs.")


@dataclass(frozen=True)
class AccessRequest:
    required_role: Optional[Role] = None
    required_permission: Optional[RequiredPermission] = None
    required_station: Optional[str] = None
    require_all_stations: bool = False
    required_permissions: tuple[RequiredPermission, ...] = ()
    allowed_stations: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.required_role is not None and not isinstance(self.required_role, Role):
            raise ValueError("required_role must be a Role or None.")

        if self.required_permission is not None and not isinstance(
            self.required_permission, RequiredPermission
        ):
            raise ValueError("required_permission must be RequiredPermission or None.")

        if not isinstance(self.required_permissions, tuple) or not all(
            isinstance(item, RequiredPermission) for item in self.required_permissions
        ):
            raise ValueError("required_permissions must be a tuple of RequiredPermission.")

        if self.required_station is not None and (
            not isinstance(self.required_station, str) or not self.required_station
        ):
            raise ValueError("required_station must be a non-empty string or None.")

        if not isinstance(self.allowed_stations, frozenset) or not all(
            isinstance(station, str) and station for station in self.allowed_stations
        ):
            raise ValueError("allowed_stations must be a frozenset of station names.")

        if not isinstance(self.require_all_stations, bool):
            raise ValueError("require_all_stations must be a bool.")

    def all_permissions(self) -> tuple[RequiredPermission, ...]:
        """Every permission the request needs, single one first."""
        if self.required_permission is None:
            return self.required_permissions
        return (self.required_permission,) + self.required_permissions

    @classmethod
    def build(
        cls,
        *,
        role: Role | str | None = None,
        module: Optional[str] = None,
        action: Optional[str] = None,
        permissions: Optional[Iterable] = None,
        station: Optional[str] = None,
        allowed_stations: Optional[Iterable[str]] = None,
        all_stations: bool = False,
    ) -> "AccessRequest":
        """Convenience constructor taking plain labels, as route tables do."""
        required_role = None
        if role is not None:
            required_role = Role.from_label(role)
            if required_role is None:
                raise ValueError(f"role '{role}' not valid.")

        required_permission = None
        if module is not None or action is not None:
            required_permission = RequiredPermission(module=module, action=action)

        if isinstance(allowed_stations, str):
            allowed_stations = (allowed_stations,)

        return cls(
            required_role=required_role,
            required_permission=required_permission,
            required_permissions=tuple(
                RequiredPermission.coerce(item) for item in permissions or ()
            ),
            required_station=station,
            allowed_stations=frozenset(allowed_stations or ()),
            require_all_stations=all_stations,
        )
