"""
Portal Profiles — DB-backed Provider
====================================
Resolves actor profiles and role options from the profiles store.
Every call reads the table: no profile is cached between decisions.
"""

from __future__ import annotations

import logging

from portal.profiles.models import ActorProfile
from portal.profiles.provider import load_profile
from portal.roles.models import RoleOption

logger = logging.getLogger("portal.profiles")


class DbProfileProvider:
    def get_profile(self, email: str) -> ActorProfile | None:
        if not isinstance(email, str) or not email.strip():
            return None

        from portal.profiles_store.models import UserProfile

        row = (
            UserProfile.objects.filter(email__iexact=email.strip())
            .order_by("id")
            .first()
        )
        if row is None:
            return None
        if not row.is_active:
            logger.info(f"Profile '{row.email}' is inactive; treating as absent.")
            return None

        return load_profile(
            {
                "email": row.email,
                "role": row.role,
                "permissions": row.detailed_permissions,
                "station_access": row.station_access,
            }
        )

    def list_role_options(self) -> tuple[RoleOption, ...]:
        from portal.profiles_store.models import RoleDefinition

        options: list[RoleOption] = []
        for row in RoleDefinition.objects.order_by("id"):
            try:
                options.append(
                    RoleOption(
                        id=row.id,
                        role_name=row.role_name,
                        role_code=row.role_code,
                        description=row.description,
                    )
                )
            except ValueError:
                logger.warning(f"Skipping unusable role row id={row.id}.")
                continue
        return tuple(options)
