"""
Portal Django Adapter Wiring
============================
Builds the process-wide collaborators the views share:
- the single EditLock instance (read fresh on every guarded action)
- the profile provider (DB-backed unless overridden)
- the clock
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import timedelta

from django.conf import settings

from portal.authorization.redirects import LOGIN_PATH, UNAUTHORIZED_PATH
from portal.edit_mode import EditLock, EditModeGate, LoggingNoticeSink, NoticeSink
from portal.profiles import DbProfileProvider, ProfileProvider
from portal.session.store import DEFAULT_SESSION_KEY
from portal.time import SESSION_TTL, Clock, SystemClock

_DEPENDENCIES_LOCK = threading.Lock()
_DEPENDENCIES: "PortalDependencies | None" = None


@dataclass
class PortalDependencies:
    edit_lock: EditLock
    profile_provider: ProfileProvider
    clock: Clock = field(default_factory=SystemClock)
    notices: NoticeSink = field(default_factory=LoggingNoticeSink)

    def edit_gate(self) -> EditModeGate:
        return EditModeGate(self.edit_lock, notices=self.notices)


def portal_setting(name: str, default):
    return getattr(settings, name, default)


def session_key() -> str:
    return portal_setting("PORTAL_SESSION_KEY", DEFAULT_SESSION_KEY)


def session_ttl() -> timedelta:
    seconds = portal_setting("PORTAL_SESSION_TTL_SECONDS", None)
    if seconds is None:
        return SESSION_TTL
    return timedelta(seconds=int(seconds))


def login_url() -> str:
    return portal_setting("PORTAL_LOGIN_URL", LOGIN_PATH)


def unauthorized_url() -> str:
    return portal_setting("PORTAL_UNAUTHORIZED_URL", UNAUTHORIZED_PATH)


def build_dependencies() -> PortalDependencies:
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        if _DEPENDENCIES is None:
            _DEPENDENCIES = PortalDependencies(
                edit_lock=EditLock(
                    enabled=bool(portal_setting("PORTAL_EDIT_MODE_ENABLED", False))
                ),
                profile_provider=DbProfileProvider(),
            )
        return _DEPENDENCIES


def set_dependencies(dependencies: "PortalDependencies | None") -> None:
    """Replace the shared dependencies (None rebuilds from settings)."""
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        _DEPENDENCIES = dependencies
