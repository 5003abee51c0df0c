"""
Portal Authorization — Public API
=================================
"""

from portal.authorization.engine import AuthorizationEngine
from portal.authorization.reasons import AuthorizationDecision, DenyReason
from portal.authorization.redirects import (
    LOGIN_PATH,
    UNAUTHORIZED_PATH,
    redirect_target,
)
from portal.authorization.request import AccessRequest, RequiredPermission

__all__ = [
    "AuthorizationEngine",
    "AuthorizationDecision",
    "DenyReason",
    "AccessRequest",
    "RequiredPermission",
    "redirect_target",
    "LOGIN_PATH",
    "UNAUTHORIZED_PATH",
]
