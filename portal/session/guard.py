"""
Portal Session — Session Guard
==============================
Decides whether the stored session is still good:

  ABSENT   no record, or the record cannot be parsed
  EXPIRED  not authenticated, or now - login_time >= ttl
  VALID    otherwise

On ABSENT/EXPIRED the stored record is cleared, so a later read
cannot bring it back. check() on a caller-supplied session only
clears the store when that session is the stored record. Parse failures never surface as VALID and
never raise out of the guard.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Optional

from portal.profiles.errors import MalformedProfileError
from portal.session.models import Session
from portal.session.store import SessionStore
from portal.time.clock import Clock, SystemClock
from portal.time.temporal import SESSION_TTL, is_expired, seconds_until_expiry

logger = logging.getLogger("portal.session")


class SessionState(Enum):
    VALID = "VALID"
    EXPIRED = "EXPIRED"
    ABSENT = "ABSENT"


@dataclass(frozen=True)
class SessionValidation:
    state: SessionState
    session: Optional[Session] = None
    malformed: bool = False

    @property
    def is_valid(self) -> bool:
        return self.state == SessionState.VALID


class SessionGuard:
    def __init__(
        self,
        store: SessionStore,
        clock: Optional[Clock] = None,
        ttl: timedelta = SESSION_TTL,
    ) -> None:
        if ttl <= timedelta(0):
            raise ValueError("ttl must be positive.")
        self._store = store
        self._clock = clock or SystemClock()
        self._ttl = ttl

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def validate(self) -> SessionValidation:
        """Read the stored record and validate it."""
        try:
            text = self._store.read()
        except Exception:
            logger.warning("Session store read failed; treating session as absent.")
            return self._discard(SessionState.ABSENT, malformed=True)

        if text is None:
            return SessionValidation(state=SessionState.ABSENT)

        try:
            session = Session.from_json(text)
        except MalformedProfileError as exc:
            logger.warning(f"Discarding unparseable session record: {exc}")
            return self._discard(SessionState.ABSENT, malformed=True)

        return self._judge(session, owned=True)

    def check(self, session: Optional[Session]) -> SessionValidation:
        """
        Validate a caller-supplied session against the clock.

        The store is only cleared when the rejected session is the one
        it holds; another login kept there is left alone.
        """
        if session is None:
            return SessionValidation(state=SessionState.ABSENT)

        if not isinstance(session, Session):
            return SessionValidation(state=SessionState.ABSENT, malformed=True)

        return self._judge(session, owned=self._is_stored(session))

    def seconds_remaining(self, session: Session) -> Optional[float]:
        """Seconds left before the session expires, None once it has."""
        return seconds_until_expiry(
            session.login_time, self._ttl, self._clock.now_utc()
        )

    def _judge(self, session: Session, *, owned: bool) -> SessionValidation:
        if not session.is_authenticated:
            logger.info(f"Session for '{session.email}' is not authenticated.")
            return self._reject(SessionState.EXPIRED, session, owned)

        if is_expired(session.login_time, self._ttl, self._clock.now_utc()):
            logger.info(f"Session for '{session.email}' expired.")
            return self._reject(SessionState.EXPIRED, session, owned)

        return SessionValidation(state=SessionState.VALID, session=session)

    def _reject(
        self, state: SessionState, session: Session, owned: bool
    ) -> SessionValidation:
        if owned:
            return self._discard(state, session=session)
        return SessionValidation(state=state, session=session)

    def _is_stored(self, session: Session) -> bool:
        try:
            text = self._store.read()
            return text is not None and Session.from_json(text) == session
        except Exception:
            return False

    def _discard(
        self,
        state: SessionState,
        *,
        session: Optional[Session] = None,
        malformed: bool = False,
    ) -> SessionValidation:
        try:
            self._store.clear()
        except Exception:
            logger.error("Session store clear failed.")
        return SessionValidation(state=state, session=session, malformed=malformed)
