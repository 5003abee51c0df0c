"""
Portal Profiles — Provider Protocol and In-Memory Provider
==========================================================
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Protocol

from portal.profiles.errors import MalformedProfileError
from portal.profiles.models import ActorProfile

logger = logging.getLogger("portal.profiles")


class ProfileProvider(Protocol):
    def get_profile(self, email: str) -> ActorProfile | None:
        ...


def _normalize_email(email) -> str | None:
    if not isinstance(email, str) or not email.strip():
        return None
    return email.strip().lower()


class InMemoryProfileProvider:
    """
    Deterministic in-memory provider used by tests and local wiring.

    Profiles can be replaced at runtime (an administrator editing a
    user's role); lookups always return the current entry.
    """

    def __init__(self, profiles: Iterable[ActorProfile] | None = None):
        self._profiles: dict[str, ActorProfile] = {}
        for profile in profiles or ():
            key = _normalize_email(profile.email)
            if key is None:
                raise ValueError("in-memory profiles must carry an email.")
            if key in self._profiles:
                raise ValueError(f"Duplicate profile for '{profile.email}'.")
            self._profiles[key] = profile

    def get_profile(self, email: str) -> ActorProfile | None:
        key = _normalize_email(email)
        if key is None:
            return None
        return self._profiles.get(key)

    def put_profile(self, profile: ActorProfile) -> None:
        key = _normalize_email(profile.email)
        if key is None:
            raise ValueError("profile must carry an email.")
        self._profiles[key] = profile

    def remove_profile(self, email: str) -> None:
        key = _normalize_email(email)
        if key is not None:
            self._profiles.pop(key, None)


def load_profile(record: Mapping[str, Any] | None) -> ActorProfile | None:
    """Parse a stored record, returning None instead of raising."""
    if record is None:
        return None
    try:
        return ActorProfile.from_record(record)
    except MalformedProfileError as exc:
        logger.warning(
            f"Discarding malformed profile record ({exc.field_name or 'record'}): {exc}"
        )
        return None
