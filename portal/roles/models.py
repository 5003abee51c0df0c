"""
Portal Roles — Role Enum and Management Projection
==================================================
Roles form a fixed total order:
  EMPLOYEE (1) < MANAGEMENT (2) < ADMINISTRATOR (3)

Enum values ARE the hierarchy levels.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Role(Enum):
    """Closed set of portal roles, valued by hierarchy level."""

    EMPLOYEE = 1
    MANAGEMENT = 2
    ADMINISTRATOR = 3

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_label(cls, value) -> Optional["Role"]:
        """
        Resolve a stored role string ("Employee", "management", ...).

        Returns None for anything unrecognized; callers decide how to
        degrade (never upward).
        """
        if isinstance(value, Role):
            return value
        if not isinstance(value, str):
            return None
        return _CODES.get(value.strip().lower())


_LABELS = {
    Role.EMPLOYEE: "Employee",
    Role.MANAGEMENT: "Management",
    Role.ADMINISTRATOR: "Administrator",
}

# Role codes in use by the role-management screens. "Manager" and "Admin"
# are legacy codes still present in stored role rows.
_CODES = {
    "employee": Role.EMPLOYEE,
    "management": Role.MANAGEMENT,
    "manager": Role.MANAGEMENT,
    "administrator": Role.ADMINISTRATOR,
    "admin": Role.ADMINISTRATOR,
}

LOWEST_ROLE = Role.EMPLOYEE


def resolve_role_code(role_code) -> Role:
    """Map a role code onto Role; unknown codes get the lowest privilege."""
    role = Role.from_label(role_code)
    return LOWEST_ROLE if role is None else role


@dataclass(frozen=True)
class RoleOption:
    """
    Role as rendered/selected in the user-management screens.

    Only role_code carries meaning for authorization.
    """

    id: int
    role_name: str
    role_code: str
    description: str = ""

    def __post_init__(self):
        if not self.role_name or not isinstance(self.role_name, str):
            raise ValueError("role_name must be a non-empty string.")

        if not self.role_code or not isinstance(self.role_code, str):
            raise ValueError("role_code must be a non-empty string.")

    @property
    def role(self) -> Role:
        return resolve_role_code(self.role_code)

    def is_recognized(self) -> bool:
        return Role.from_label(self.role_code) is not None
