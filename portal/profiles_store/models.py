"""
Portal Profiles Store - Relational Profile State
================================================
UserProfile holds the role, permission matrix and station access of
one portal user. RoleDefinition backs the role-management screens.
"""

from __future__ import annotations

from django.db import models


class ProfileRole(models.TextChoices):
    EMPLOYEE = "Employee", "Employee"
    MANAGEMENT = "Management", "Management"
    ADMINISTRATOR = "Administrator", "Administrator"


class UserProfile(models.Model):
    email = models.EmailField(max_length=255, unique=True)
    role = models.CharField(max_length=32, default=ProfileRole.EMPLOYEE)
    # "ALL" or a list of station identifiers.
    station_access = models.JSONField(default=list, blank=True)
    detailed_permissions = models.JSONField(default=dict, blank=True)
    employee_id = models.CharField(max_length=64, default="", blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "portal_user_profiles"
        ordering = ["email", "id"]
        indexes = [
            models.Index(fields=["role"], name="idx_user_profile_role"),
        ]

    def __str__(self) -> str:
        return f"{self.email} ({self.role})"


class RoleDefinition(models.Model):
    role_name = models.CharField(max_length=128)
    role_code = models.CharField(max_length=32, unique=True)
    description = models.TextField(default="", blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "portal_roles"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.role_code} ({self.role_name})"
