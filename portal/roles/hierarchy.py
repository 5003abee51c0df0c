"""
Portal Roles — Hierarchy Comparison
===================================
satisfies(actual, required) == level(actual) >= level(required).
Unrecognized roles sit at level 0 and fail every requirement.
"""

from __future__ import annotations

from portal.roles.models import Role

UNRECOGNIZED_LEVEL = 0


def role_level(role) -> int:
    """Level of a Role member or stored role label; 0 when unrecognized."""
    resolved = Role.from_label(role)
    if resolved is None:
        return UNRECOGNIZED_LEVEL
    return resolved.value


def satisfies(actual_role, required_role) -> bool:
    """Check the actor's role against a minimum role (None always passes)."""
    if required_role is None:
        return True
    required_level = role_level(required_role)
    if required_level == UNRECOGNIZED_LEVEL:
        # Unrecognized requirement fails closed.
        return False
    return role_level(actual_role) >= required_level


def is_admin(role) -> bool:
    return role_level(role) == Role.ADMINISTRATOR.value


def is_manager(role) -> bool:
    """Management or above."""
    return role_level(role) >= Role.MANAGEMENT.value


def is_employee(role) -> bool:
    return role_level(role) == Role.EMPLOYEE.value
