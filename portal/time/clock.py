"""
Portal Time — Session Clock
===========================
Session expiry compares a stored login time against "now". The
guard and login service take a Clock so tests can pin or move time
across the 24-hour boundary.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol


class Clock(Protocol):
    def now_utc(self) -> datetime:
        ...  # pragma: no cover


class SystemClock:
    """Wall-clock UTC; the default wherever no clock is passed."""

    def now_utc(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Pinned clock for session tests.

        clock = FixedClock(login_time)
        clock.advance(hours=24)     # now exactly at the expiry boundary
    """

    def __init__(self, fixed_dt: datetime) -> None:
        if fixed_dt.tzinfo is None:
            raise ValueError("FixedClock requires timezone-aware datetime.")
        self._now = fixed_dt

    def now_utc(self) -> datetime:
        return self._now

    def advance(self, seconds: float = 0, *, hours: float = 0) -> None:
        self._now = self._now + timedelta(seconds=seconds, hours=hours)
