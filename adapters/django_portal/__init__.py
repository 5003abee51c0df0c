"""
Portal Django adapter.
Thin framework glue over the portal access core.
"""

from adapters.django_portal.guards import authorize_request, require_access
from adapters.django_portal.wiring import (
    PortalDependencies,
    build_dependencies,
    set_dependencies,
)

__all__ = [
    "PortalDependencies",
    "build_dependencies",
    "set_dependencies",
    "authorize_request",
    "require_access",
]
