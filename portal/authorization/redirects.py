"""
Portal Authorization — Redirect Targets
=======================================
UNAUTHENTICATED goes back to login; every other denial goes to the
"unauthorized" page.
"""

from __future__ import annotations

from typing import Optional

from portal.authorization.reasons import AuthorizationDecision, DenyReason

LOGIN_PATH = "/login"
UNAUTHORIZED_PATH = "/unauthorized"


def redirect_target(
    decision: AuthorizationDecision,
    *,
    login_path: str = LOGIN_PATH,
    unauthorized_path: str = UNAUTHORIZED_PATH,
) -> Optional[str]:
    """Where to send the caller, or None when the decision allows."""
    if decision.allowed:
        return None
    if decision.reason == DenyReason.UNAUTHENTICATED:
        return login_path
    return unauthorized_path
