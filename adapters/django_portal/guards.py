"""
Portal Django Route Guards
==========================
require_access() wraps a view with one authorization decision:
  UNAUTHENTICATED      → redirect to PORTAL_LOGIN_URL
  any other denial     → redirect to PORTAL_UNAUTHORIZED_URL
  allowed              → view runs with request.portal_profile set
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable
from typing import Optional

from django.http import HttpRequest, HttpResponseRedirect

from adapters.django_portal.wiring import (
    build_dependencies,
    login_url,
    session_key,
    session_ttl,
    unauthorized_url,
)
from portal.authorization import (
    AccessRequest,
    AuthorizationDecision,
    AuthorizationEngine,
    redirect_target,
)
from portal.profiles import ActorProfile
from portal.roles import Role
from portal.session import DjangoSessionStore

logger = logging.getLogger("portal.authorization")


def authorize_request(
    request: HttpRequest,
    access_request: AccessRequest,
) -> tuple[AuthorizationDecision, Optional[ActorProfile]]:
    """Run the engine against the Django session behind `request`."""
    dependencies = build_dependencies()
    engine = AuthorizationEngine(
        DjangoSessionStore(request.session, key=session_key()),
        clock=dependencies.clock,
        ttl=session_ttl(),
    )

    validation = engine.session_guard.validate()
    profile = None
    if validation.is_valid:
        try:
            profile = dependencies.profile_provider.get_profile(
                validation.session.email
            )
        except Exception:
            logger.warning(
                f"Profile lookup failed for '{validation.session.email}'; denying."
            )
            profile = None

    return engine.decide(validation, profile, access_request), profile


def _station_from(kwargs: dict, station_kwarg: Optional[str], fallback: Optional[str]):
    if station_kwarg is None:
        return fallback
    value = kwargs.get(station_kwarg)
    if value is None or value == "":
        return fallback
    return str(value)


def require_access(
    *,
    role: Role | str | None = None,
    module: Optional[str] = None,
    action: Optional[str] = None,
    permissions: Optional[Iterable] = None,
    station: Optional[str] = None,
    station_kwarg: Optional[str] = None,
    allowed_stations: Optional[Iterable[str]] = None,
    all_stations: bool = False,
):
    """
    View decorator.

    station_kwarg names a URL kwarg holding the station to check
    (e.g. path("stations/<str:station>/sales", ...)).
    permissions takes (module, action) pairs, all of which must be granted;
    allowed_stations passes when the actor can reach any one of them.
    """
    permissions = tuple(permissions or ())
    allowed_stations = (
        (allowed_stations,) if isinstance(allowed_stations, str)
        else tuple(allowed_stations or ())
    )
    # Reject bad static requirements when the view is decorated.
    AccessRequest.build(
        role=role, module=module, action=action, permissions=permissions,
        station=station, allowed_stations=allowed_stations,
        all_stations=all_stations,
    )

    def decorator(view):
        @functools.wraps(view)
        def wrapper(request: HttpRequest, *args, **kwargs):
            access_request = AccessRequest.build(
                role=role,
                module=module,
                action=action,
                permissions=permissions,
                allowed_stations=allowed_stations,
                station=_station_from(kwargs, station_kwarg, station),
                all_stations=all_stations,
            )
            decision, profile = authorize_request(request, access_request)
            target = redirect_target(
                decision,
                login_path=login_url(),
                unauthorized_path=unauthorized_url(),
            )
            if target is not None:
                return HttpResponseRedirect(target)

            request.portal_profile = profile
            return view(request, *args, **kwargs)

        return wrapper

    return decorator
