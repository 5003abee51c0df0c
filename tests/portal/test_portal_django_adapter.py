from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest
from django.contrib.sessions.backends.cache import SessionStore as CacheSession
from django.http import HttpResponse
from django.test import Client, RequestFactory

from adapters.django_portal import (
    PortalDependencies,
    build_dependencies,
    require_access,
    set_dependencies,
)
from portal.edit_mode import EditLock, InMemoryNoticeSink
from portal.permissions import PermissionMatrix
from portal.profiles import ActorProfile, InMemoryProfileProvider
from portal.roles import Role
from portal.session import DjangoSessionStore, SessionManager
from portal.stations import StationAccess
from portal.time import FixedClock

LOGIN = datetime(2025, 9, 1, 7, 30, tzinfo=timezone.utc)

ADMIN = ActorProfile(
    role=Role.ADMINISTRATOR,
    permissions=PermissionMatrix.from_mapping(
        {"users": {"edit": True}, "sales": {"view": True}}
    ),
    station_access=StationAccess.all(),
    email="admin@example.com",
)
EMPLOYEE = ActorProfile(
    role=Role.EMPLOYEE,
    permissions=PermissionMatrix.from_mapping({"sales": {"view": True}}),
    station_access=StationAccess.only("North"),
    email="ana@example.com",
)


@pytest.fixture
def portal_deps():
    deps = PortalDependencies(
        edit_lock=EditLock(),
        profile_provider=InMemoryProfileProvider([ADMIN, EMPLOYEE]),
        clock=FixedClock(LOGIN),
        notices=InMemoryNoticeSink(),
    )
    set_dependencies(deps)
    yield deps
    set_dependencies(None)


def _login(session, deps, profile: ActorProfile) -> None:
    SessionManager(DjangoSessionStore(session), deps.clock).start(
        email=profile.email, role=profile.role, station="North"
    )
    session.save()


def _client_as(deps, profile: ActorProfile | None) -> Client:
    client = Client()
    if profile is not None:
        session = client.session
        _login(session, deps, profile)
    return client


def _request_as(deps, profile: ActorProfile):
    request = RequestFactory().get("/stations")
    request.session = CacheSession()
    _login(request.session, deps, profile)
    return request


# ── Edit-mode views ──────────────────────────────────────────

class TestEditModeViews:
    def test_status_requires_session(self, portal_deps):
        response = _client_as(portal_deps, None).get("/portal/edit-mode")
        assert response.status_code == 302
        assert response.url == "/login"

    def test_status_for_any_logged_in_actor(self, portal_deps):
        response = _client_as(portal_deps, EMPLOYEE).get("/portal/edit-mode")
        assert response.status_code == 200
        assert response.json() == {"enabled": False, "reason": None}

    def test_toggle_requires_administrator(self, portal_deps):
        response = _client_as(portal_deps, EMPLOYEE).post("/portal/edit-mode/toggle")
        assert response.status_code == 302
        assert response.url == "/unauthorized"
        assert portal_deps.edit_lock.enabled is False

    def test_toggle_flips_lock(self, portal_deps):
        client = _client_as(portal_deps, ADMIN)
        response = client.post("/portal/edit-mode/toggle")
        assert response.status_code == 200
        assert response.json() == {"enabled": True, "reason": None}
        assert portal_deps.edit_gate().guarded_action("save", lambda: 1).ok

    def test_form_post_flips_lock(self, portal_deps):
        response = _client_as(portal_deps, ADMIN).post(
            "/portal/edit-mode/toggle", data={"note": "ignored"}
        )
        assert response.status_code == 200
        assert response.json() == {"enabled": True, "reason": None}

    def test_explicit_state_with_reason(self, portal_deps):
        portal_deps.edit_lock.enable()
        response = _client_as(portal_deps, ADMIN).post(
            "/portal/edit-mode/toggle",
            data=json.dumps({"enabled": False, "reason": "stock count"}),
            content_type="application/json",
        )
        assert response.json() == {"enabled": False, "reason": "stock count"}

    @pytest.mark.parametrize("body", ['{"enabled": "yes"}', "[1]", "{oops"])
    def test_invalid_body(self, portal_deps, body):
        response = _client_as(portal_deps, ADMIN).post(
            "/portal/edit-mode/toggle", data=body, content_type="application/json"
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_REQUEST"
        assert portal_deps.edit_lock.enabled is False

    def test_toggle_rejects_get(self, portal_deps):
        response = _client_as(portal_deps, ADMIN).get("/portal/edit-mode/toggle")
        assert response.status_code == 405

    def test_expired_session_is_cleared_and_redirected(self, portal_deps):
        client = _client_as(portal_deps, ADMIN)
        portal_deps.clock.advance(hours=25)
        response = client.get("/portal/edit-mode")
        assert response.status_code == 302
        assert response.url == "/login"
        assert client.session.get("user_session") is None


# ── require_access ───────────────────────────────────────────

@require_access(module="sales", action="view", station_kwarg="station")
def station_sales_view(request, station):
    return HttpResponse(f"{request.portal_profile.email}:{station}")


@require_access(all_stations=True)
def network_report_view(request):
    return HttpResponse("ok")


@require_access(
    permissions=[("sales", "view"), ("users", "edit")],
    allowed_stations=["North", "South"],
)
def regional_admin_view(request):
    return HttpResponse("ok")


class TestRequireAccess:
    def test_station_from_url_kwarg(self, portal_deps):
        response = station_sales_view(_request_as(portal_deps, EMPLOYEE), station="North")
        assert response.status_code == 200
        assert response.content == b"ana@example.com:North"

    def test_other_station_denied(self, portal_deps):
        response = station_sales_view(_request_as(portal_deps, EMPLOYEE), station="South")
        assert response.status_code == 302
        assert response.url == "/unauthorized"

    def test_all_stations(self, portal_deps):
        assert network_report_view(_request_as(portal_deps, ADMIN)).status_code == 200
        assert network_report_view(_request_as(portal_deps, EMPLOYEE)).status_code == 302

    def test_listed_permissions_and_allowed_stations(self, portal_deps):
        assert regional_admin_view(_request_as(portal_deps, ADMIN)).status_code == 200
        response = regional_admin_view(_request_as(portal_deps, EMPLOYEE))
        assert response.status_code == 302
        assert response.url == "/unauthorized"

    def test_profile_removed_after_login(self, portal_deps):
        request = _request_as(portal_deps, EMPLOYEE)
        portal_deps.profile_provider.remove_profile(EMPLOYEE.email)
        response = station_sales_view(request, station="North")
        assert response.url == "/login"

    def test_provider_error_fails_closed(self, portal_deps):
        class BrokenProvider:
            def get_profile(self, email):
                raise RuntimeError("db down")

        portal_deps.profile_provider = BrokenProvider()
        response = station_sales_view(_request_as(portal_deps, EMPLOYEE), station="North")
        assert response.status_code == 302
        assert response.url == "/login"

    def test_redirect_urls_come_from_settings(self, portal_deps, settings):
        settings.PORTAL_UNAUTHORIZED_URL = "/no-access"
        response = station_sales_view(_request_as(portal_deps, EMPLOYEE), station="South")
        assert response.url == "/no-access"

    def test_session_ttl_from_settings(self, portal_deps, settings):
        settings.PORTAL_SESSION_TTL_SECONDS = 60
        request = _request_as(portal_deps, EMPLOYEE)
        portal_deps.clock.advance(120)
        assert station_sales_view(request, station="North").url == "/login"

    def test_invalid_static_requirement_rejected_at_decoration(self):
        with pytest.raises(ValueError):
            require_access(role="Owner")
        with pytest.raises(ValueError):
            require_access(permissions=[("sales", "manage")])


class TestWiring:
    def test_defaults_built_from_settings(self, settings):
        set_dependencies(None)
        settings.PORTAL_EDIT_MODE_ENABLED = True
        try:
            deps = build_dependencies()
            assert deps.edit_lock.enabled is True
            assert build_dependencies() is deps
        finally:
            set_dependencies(None)
