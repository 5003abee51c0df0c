"""
Portal Permissions - Public API
===============================
"""

from portal.permissions.constants import (
    ACTION_CREATE,
    ACTION_DELETE,
    ACTION_EDIT,
    ACTION_VIEW,
    KNOWN_MODULES,
    MODULE_DISPLAY_NAMES,
    MUTATING_ACTIONS,
    VALID_ACTIONS,
)
from portal.permissions.defaults import default_permissions_for
from portal.permissions.matrix import has_any_permission, has_permission
from portal.permissions.models import PermissionMatrix

__all__ = [
    "ACTION_VIEW",
    "ACTION_CREATE",
    "ACTION_EDIT",
    "ACTION_DELETE",
    "VALID_ACTIONS",
    "MUTATING_ACTIONS",
    "KNOWN_MODULES",
    "MODULE_DISPLAY_NAMES",
    "PermissionMatrix",
    "has_permission",
    "has_any_permission",
    "default_permissions_for",
]
