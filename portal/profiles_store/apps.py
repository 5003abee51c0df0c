"""
Portal Profiles Store - App Configuration
=========================================
Persistent user profiles and role-management rows.
"""

from django.apps import AppConfig


class PortalProfilesStoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "portal.profiles_store"
    label = "portal_profiles_store"
    verbose_name = "Portal Profiles Store"
