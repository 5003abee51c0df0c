"""
Portal Profiles — Public API
============================
"""

from portal.profiles.db_provider import DbProfileProvider
from portal.profiles.errors import MalformedProfileError
from portal.profiles.models import ActorProfile
from portal.profiles.provider import (
    InMemoryProfileProvider,
    ProfileProvider,
    load_profile,
)

__all__ = [
    "ActorProfile",
    "MalformedProfileError",
    "ProfileProvider",
    "InMemoryProfileProvider",
    "DbProfileProvider",
    "load_profile",
]
