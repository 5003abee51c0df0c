"""
Portal Session — Public API
===========================
"""

from portal.session.guard import SessionGuard, SessionState, SessionValidation
from portal.session.models import Session
from portal.session.service import SessionManager
from portal.session.store import (
    DEFAULT_SESSION_KEY,
    DjangoSessionStore,
    InMemorySessionStore,
    SessionStore,
)

__all__ = [
    "Session",
    "SessionStore",
    "InMemorySessionStore",
    "DjangoSessionStore",
    "DEFAULT_SESSION_KEY",
    "SessionGuard",
    "SessionState",
    "SessionValidation",
    "SessionManager",
]
