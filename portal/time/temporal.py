"""
Portal Time — Temporal Helpers
==============================
Pure functions for session lifetime checks.
All functions take explicit datetime arguments; none reads the clock.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

SESSION_TTL = timedelta(hours=24)


def is_expired(issued_at: datetime, ttl: timedelta, now: datetime) -> bool:
    """
    True once `ttl` or more has elapsed since `issued_at`.

    The boundary itself counts as expired: a session is only fresh
    while now - issued_at < ttl.

    An issued_at in the future is not clamped: the session stays fresh
    until ttl after that time. Records are written by SessionManager
    from the server clock, so skew is bounded by who can write the
    session store.
    """
    return now - issued_at >= ttl


def seconds_until_expiry(
    issued_at: datetime, ttl: timedelta, now: datetime
) -> Optional[float]:
    """Return seconds remaining before expiry, or None if already expired."""
    remaining = (ttl - (now - issued_at)).total_seconds()
    return remaining if remaining > 0 else None


def parse_utc_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.

    Browser-style "Z" suffixes are accepted and naive values are read
    as UTC. Raises ValueError for anything unparseable.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("timestamp must be a non-empty ISO-8601 string.")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
