"""
Portal Permissions - Immutable Permission Matrix
================================================
A matrix is the set of (module, action) pairs explicitly granted.
Anything not in the set is denied: there is no parent-module
inheritance and no wildcard action.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from portal.permissions.constants import VALID_ACTIONS


@dataclass(frozen=True)
class PermissionMatrix:
    grants: frozenset[tuple[str, str]] = field(default_factory=frozenset)

    def __post_init__(self):
        if not isinstance(self.grants, frozenset):
            raise ValueError("grants must be a frozenset.")

        for grant in self.grants:
            if (
                not isinstance(grant, tuple)
                or len(grant) != 2
                or not all(isinstance(part, str) and part for part in grant)
            ):
                raise ValueError(
                    "grants must contain (module, action) string pairs."
                )

    @classmethod
    def from_mapping(cls, permissions) -> "PermissionMatrix":
        """
        Build from the stored shape {module: {action: bool}}.

        Only values that are exactly True grant; "true", 1 and the like
        are ignored. Non-mapping module entries are skipped.
        """
        if permissions is None:
            return cls()
        if not isinstance(permissions, Mapping):
            raise ValueError("permissions must be a mapping of module to actions.")

        grants = set()
        for module, actions in permissions.items():
            if not isinstance(module, str) or not module:
                continue
            if not isinstance(actions, Mapping):
                continue
            for action, value in actions.items():
                if isinstance(action, str) and action and value is True:
                    grants.add((module, action))
        return cls(grants=frozenset(grants))

    def allows(self, module: str, action: str) -> bool:
        return (module, action) in self.grants

    def granted_actions(self, module: str) -> tuple[str, ...]:
        return tuple(
            sorted(action for granted, action in self.grants if granted == module)
        )

    def modules(self) -> tuple[str, ...]:
        return tuple(sorted({module for module, _ in self.grants}))

    def to_dict(self) -> dict[str, dict[str, bool]]:
        """Serialize with all four actions spelled out per granted module."""
        return {
            module: {
                action: (module, action) in self.grants
                for action in VALID_ACTIONS
            }
            for module in self.modules()
        }
