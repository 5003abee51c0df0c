"""
Portal Django Adapter Views
===========================
Edit-mode status and the administrator toggle.
"""

from __future__ import annotations

import json
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET, require_POST

from adapters.django_portal.guards import require_access
from adapters.django_portal.wiring import build_dependencies
from portal.roles import Role


def _parse_json_body(request: HttpRequest) -> dict[str, Any]:
    # Form posts and empty bodies carry no explicit state.
    if request.content_type != "application/json" or not request.body:
        return {}
    try:
        parsed = json.loads(request.body.decode("utf-8"))
    except Exception as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object.")
    return parsed


@require_GET
@require_access()
def edit_mode_status_view(request: HttpRequest) -> JsonResponse:
    return JsonResponse(build_dependencies().edit_lock.snapshot())


@require_POST
@require_access(role=Role.ADMINISTRATOR)
def edit_mode_toggle_view(request: HttpRequest) -> JsonResponse:
    """
    A JSON body {"enabled": bool, "reason": str} sets the lock explicitly;
    any other POST flips it.
    """
    try:
        body = _parse_json_body(request)
    except ValueError as exc:
        return JsonResponse(
            {"code": "INVALID_REQUEST", "message": str(exc)}, status=400
        )

    lock = build_dependencies().edit_lock
    if "enabled" in body:
        enabled = body["enabled"]
        if not isinstance(enabled, bool):
            return JsonResponse(
                {"code": "INVALID_REQUEST", "message": "enabled must be a boolean."},
                status=400,
            )
        reason = body.get("reason")
        lock.set_enabled(enabled, reason if isinstance(reason, str) else None)
    else:
        lock.toggle()
    return JsonResponse(lock.snapshot())
