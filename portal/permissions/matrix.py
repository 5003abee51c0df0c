"""
Portal Permissions - Matrix Lookup
==================================
Pure lookups over a profile's permission matrix. Never raise:
a profile without a usable matrix simply has no permissions.
"""

from __future__ import annotations

from portal.permissions.models import PermissionMatrix


def _matrix_of(profile) -> PermissionMatrix | None:
    matrix = getattr(profile, "permissions", None)
    if isinstance(matrix, PermissionMatrix):
        return matrix
    return None


def has_permission(profile, module: str, action: str) -> bool:
    """Check profile.permissions[module][action] with absolute default-deny."""
    matrix = _matrix_of(profile)
    if matrix is None:
        return False
    if not isinstance(module, str) or not isinstance(action, str):
        return False
    return matrix.allows(module, action)


def has_any_permission(profile, module: str) -> bool:
    """True if any action at all is granted on the module."""
    matrix = _matrix_of(profile)
    if matrix is None or not isinstance(module, str):
        return False
    return bool(matrix.granted_actions(module))
