"""
Portal Authorization — Decision Model
=====================================
Structured allow/deny result. A denial is never raised: it is
returned with a machine-readable reason the caller maps to a
redirect or a disabled control.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DenyReason(Enum):
    UNAUTHENTICATED = "UNAUTHENTICATED"
    SESSION_EXPIRED = "SESSION_EXPIRED"
    INSUFFICIENT_ROLE = "INSUFFICIENT_ROLE"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    STATION_DENIED = "STATION_DENIED"
    MALFORMED_PROFILE = "MALFORMED_PROFILE"
    ACTION_EXECUTION_FAILURE = "ACTION_EXECUTION_FAILURE"


@dataclass(frozen=True)
class AuthorizationDecision:
    """
    Fields:
        allowed:  True for Allow.
        reason:   Deny reason (None when allowed).
        cause:    Finer-grained reason behind UNAUTHENTICATED
                  (SESSION_EXPIRED or MALFORMED_PROFILE), else None.
        message:  Human-readable explanation.
    """

    allowed: bool
    reason: Optional[DenyReason] = None
    cause: Optional[DenyReason] = None
    message: str = ""

    def __post_init__(self):
        if self.allowed and self.reason is not None:
            raise ValueError("an allowed decision cannot carry a deny reason.")

        if not self.allowed and self.reason is None:
            raise ValueError("a denied decision must carry a reason.")

    def __bool__(self) -> bool:
        return self.allowed

    @classmethod
    def allow(cls) -> "AuthorizationDecision":
        return cls(allowed=True)

    @classmethod
    def deny(
        cls,
        reason: DenyReason,
        message: str,
        cause: Optional[DenyReason] = None,
    ) -> "AuthorizationDecision":
        return cls(allowed=False, reason=reason, cause=cause, message=message)

    def to_dict(self) -> dict:
        return {
            "allowed": self.allowed,
            "reason": None if self.reason is None else self.reason.value,
            "cause": None if self.cause is None else self.cause.value,
            "message": self.message,
        }
