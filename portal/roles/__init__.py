"""
Portal Roles — Public API
=========================
Closed role enum, hierarchy comparison and the role-management projection.
"""

from portal.roles.hierarchy import (
    is_admin,
    is_employee,
    is_manager,
    role_level,
    satisfies,
)
from portal.roles.models import Role, RoleOption, resolve_role_code

__all__ = [
    "Role",
    "RoleOption",
    "resolve_role_code",
    "role_level",
    "satisfies",
    "is_admin",
    "is_manager",
    "is_employee",
]
