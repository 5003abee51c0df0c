"""
Portal Django adapter URL routing.
"""

from django.urls import path

from adapters.django_portal import views


urlpatterns = [
    path("edit-mode", views.edit_mode_status_view),
    path("edit-mode/toggle", views.edit_mode_toggle_view),
]
