"""
Portal Time — Public API
========================
Explicit clock protocol and session expiry helpers.
"""

from portal.time.clock import Clock, FixedClock, SystemClock
from portal.time.temporal import (
    SESSION_TTL,
    is_expired,
    parse_utc_timestamp,
    seconds_until_expiry,
)

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "SESSION_TTL",
    "is_expired",
    "seconds_until_expiry",
    "parse_utc_timestamp",
]
