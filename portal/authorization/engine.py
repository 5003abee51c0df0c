"""
Portal Authorization — Decision Engine
======================================
Composes the four authorization dimensions, in order:
  1. Session freshness    → UNAUTHENTICATED
  2. Role hierarchy       → INSUFFICIENT_ROLE
  3. Permission matrix    → PERMISSION_DENIED
  4. Station scope        → STATION_DENIED
     (explicit station, any-of allowed stations, then all-stations)

Short-circuits on the first failure. The dimensions are AND-combined:
passing one never compensates for failing another.

Fail-safe: an error inside any check denies at that step.
Nothing is cached between calls, so a profile edited by an
administrator is judged on its new state at the next call.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional

from portal.authorization.reasons import AuthorizationDecision, DenyReason
from portal.authorization.request import AccessRequest
from portal.permissions.matrix import has_permission
from portal.profiles.models import ActorProfile
from portal.roles.hierarchy import satisfies
from portal.session.guard import SessionGuard, SessionState, SessionValidation
from portal.session.models import Session
from portal.session.store import SessionStore
from portal.stations.scope import has_all_stations_access, has_station_access
from portal.time.clock import Clock
from portal.time.temporal import SESSION_TTL

logger = logging.getLogger("portal.authorization")


class AuthorizationEngine:
    def __init__(
        self,
        session_store: SessionStore,
        clock: Optional[Clock] = None,
        ttl: timedelta = SESSION_TTL,
    ) -> None:
        self._guard = SessionGuard(session_store, clock=clock, ttl=ttl)

    @property
    def session_guard(self) -> SessionGuard:
        return self._guard

    def authorize_current(
        self,
        profile: Optional[ActorProfile],
        request: AccessRequest,
    ) -> AuthorizationDecision:
        """Decide using the session held in the engine's store."""
        return self.decide(self._guard.validate(), profile, request)

    def authorize(
        self,
        session: Optional[Session],
        profile: Optional[ActorProfile],
        request: AccessRequest,
    ) -> AuthorizationDecision:
        """Decide for an explicitly supplied session."""
        return self.decide(self._guard.check(session), profile, request)

    def decide(
        self,
        validation: SessionValidation,
        profile: Optional[ActorProfile],
        request: AccessRequest,
    ) -> AuthorizationDecision:
        """
        Decide from a session validation the caller already holds
        (e.g. after loading the profile for validation.session.email).
        """
        decision = self._evaluate(validation, profile, request)
        if decision.allowed:
            logger.debug(f"ALLOW {request}")
        else:
            logger.info(
                f"DENY {decision.reason.value}"
                f"{' (' + decision.cause.value + ')' if decision.cause else ''}: "
                f"{decision.message}"
            )
        return decision

    # ── Steps ────────────────────────────────────────────────

    def _evaluate(self, validation, profile, request) -> AuthorizationDecision:
        # Step 1: session
        if not isinstance(validation, SessionValidation):
            return AuthorizationDecision.deny(
                DenyReason.UNAUTHENTICATED,
                "Session was not validated.",
            )

        if validation.state != SessionState.VALID:
            cause = None
            if validation.malformed:
                cause = DenyReason.MALFORMED_PROFILE
            elif validation.state == SessionState.EXPIRED:
                cause = DenyReason.SESSION_EXPIRED
            return AuthorizationDecision.deny(
                DenyReason.UNAUTHENTICATED,
                f"Session is {validation.state.value.lower()}.",
                cause=cause,
            )

        if not isinstance(profile, ActorProfile):
            return AuthorizationDecision.deny(
                DenyReason.UNAUTHENTICATED,
                "No usable actor profile for this session.",
                cause=DenyReason.MALFORMED_PROFILE,
            )

        if not isinstance(request, AccessRequest):
            return AuthorizationDecision.deny(
                DenyReason.PERMISSION_DENIED,
                "Access request is not an AccessRequest.",
            )

        # Step 2: role
        if request.required_role is not None:
            try:
                ok = satisfies(profile.role, request.required_role)
            except Exception:
                ok = False
            if not ok:
                held = "unrecognized" if profile.role is None else profile.role.label
                return AuthorizationDecision.deny(
                    DenyReason.INSUFFICIENT_ROLE,
                    f"Role '{request.required_role.label}' required; actor is {held}.",
                )

        # Step 3: permissions (all of them)
        for permission in request.all_permissions():
            try:
                ok = has_permission(profile, permission.module, permission.action)
            except Exception:
                ok = False
            if not ok:
                return AuthorizationDecision.deny(
                    DenyReason.PERMISSION_DENIED,
                    f"Missing '{permission.action}' on module '{permission.module}'.",
                )

        # Step 4: station
        if request.required_station is not None:
            try:
                ok = has_station_access(profile, request.required_station)
            except Exception:
                ok = False
            if not ok:
                return AuthorizationDecision.deny(
                    DenyReason.STATION_DENIED,
                    f"No access to station '{request.required_station}'.",
                )

        # Step 4b: any one of the allowed stations
        if request.allowed_stations:
            try:
                ok = any(
                    has_station_access(profile, station)
                    for station in sorted(request.allowed_stations)
                )
            except Exception:
                ok = False
            if not ok:
                return AuthorizationDecision.deny(
                    DenyReason.STATION_DENIED,
                    f"No access to any of {sorted(request.allowed_stations)}.",
                )

        # Step 5: all stations
        if request.require_all_stations:
            try:
                ok = has_all_stations_access(profile)
            except Exception:
                ok = False
            if not ok:
                return AuthorizationDecision.deny(
                    DenyReason.STATION_DENIED,
                    "All-stations access required.",
                )

        return AuthorizationDecision.allow()
