"""
Portal Root URL Configuration
Thin adapter routes only.
"""

from django.urls import include, path


urlpatterns = [
    path("portal/", include("adapters.django_portal.urls")),
]
