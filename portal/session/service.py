"""
Portal Session — Login/Logout Lifecycle
=======================================
Credential checks happen elsewhere. Once an actor is presumed
authenticated, start() writes the session record and end() destroys it.
"""

from __future__ import annotations

import logging
from typing import Optional

from portal.roles.models import Role
from portal.session.models import Session
from portal.session.store import SessionStore
from portal.time.clock import Clock, SystemClock

logger = logging.getLogger("portal.session")


class SessionManager:
    def __init__(self, store: SessionStore, clock: Optional[Clock] = None) -> None:
        self._store = store
        self._clock = clock or SystemClock()

    def start(self, *, email: str, role: Role | str, station: str = "") -> Session:
        if not isinstance(email, str) or not email.strip():
            raise ValueError("email must be a non-empty string.")

        role_label = role.label if isinstance(role, Role) else role
        now = self._clock.now_utc()
        # The stored record keeps milliseconds only.
        login_time = now.replace(microsecond=now.microsecond // 1000 * 1000)
        session = Session(
            email=email.strip(),
            role=role_label,
            station=station or "",
            is_authenticated=True,
            login_time=login_time,
        )
        self._store.write(session.to_json())
        logger.info(f"Session started for '{session.email}' ({role_label}).")
        return session

    def end(self) -> None:
        self._store.clear()
        logger.info("Session ended.")
