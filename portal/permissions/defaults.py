"""
Portal Permissions - Role Presets
=================================
Starting permission matrix handed to a new profile of a given role.
Administrators can edit a profile's matrix afterwards; the preset is
never consulted at decision time.
"""

from __future__ import annotations

from portal.permissions.constants import (
    ACTION_CREATE,
    ACTION_DELETE,
    ACTION_EDIT,
    ACTION_VIEW,
    KNOWN_MODULES,
    MODULE_DASHBOARD,
    MODULE_DELIVERY,
    MODULE_EMPLOYEES,
    MODULE_INVENTORY,
    MODULE_ORDERS,
    MODULE_PRODUCTS,
    MODULE_REPORTS,
    MODULE_SALARY,
    MODULE_SALES,
    MODULE_SETTINGS,
    MODULE_VENDORS,
)
from portal.permissions.models import PermissionMatrix
from portal.roles.models import Role

_ALL_ACTIONS = (ACTION_VIEW, ACTION_CREATE, ACTION_EDIT, ACTION_DELETE)
_VIEW_CREATE_EDIT = (ACTION_VIEW, ACTION_CREATE, ACTION_EDIT)

_MANAGEMENT_PRESET = {
    MODULE_DASHBOARD: (ACTION_VIEW,),
    MODULE_PRODUCTS: _VIEW_CREATE_EDIT,
    MODULE_EMPLOYEES: _VIEW_CREATE_EDIT,
    MODULE_SALES: _VIEW_CREATE_EDIT,
    MODULE_VENDORS: _VIEW_CREATE_EDIT,
    MODULE_ORDERS: _VIEW_CREATE_EDIT,
    MODULE_SALARY: _VIEW_CREATE_EDIT,
    MODULE_INVENTORY: _VIEW_CREATE_EDIT,
    MODULE_DELIVERY: _VIEW_CREATE_EDIT,
    MODULE_REPORTS: (ACTION_VIEW, ACTION_CREATE),
    MODULE_SETTINGS: (ACTION_VIEW,),
}

_EMPLOYEE_PRESET = {
    MODULE_DASHBOARD: (ACTION_VIEW,),
    MODULE_PRODUCTS: (ACTION_VIEW,),
    MODULE_SALES: _VIEW_CREATE_EDIT,
    MODULE_VENDORS: (ACTION_VIEW,),
    MODULE_ORDERS: (ACTION_VIEW,),
    MODULE_INVENTORY: (ACTION_VIEW,),
    MODULE_DELIVERY: (ACTION_VIEW, ACTION_CREATE),
}


def _matrix(preset: dict[str, tuple[str, ...]]) -> PermissionMatrix:
    return PermissionMatrix(
        grants=frozenset(
            (module, action)
            for module, actions in preset.items()
            for action in actions
        )
    )


def default_permissions_for(role: Role) -> PermissionMatrix:
    """Preset matrix for a role; anything that is not a Role gets nothing."""
    if role is Role.ADMINISTRATOR:
        return _matrix({module: _ALL_ACTIONS for module in KNOWN_MODULES})
    if role is Role.MANAGEMENT:
        return _matrix(_MANAGEMENT_PRESET)
    if role is Role.EMPLOYEE:
        return _matrix(_EMPLOYEE_PRESET)
    return PermissionMatrix()
