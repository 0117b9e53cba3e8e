# PATH: apps/core/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from apps.core.models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ("id", "email", "name", "number_of_enrolled_courses", "is_staff", "is_active")
    list_filter = ("is_staff", "is_active")
    search_fields = ("email", "name", "username")
    ordering = ("-id",)
    readonly_fields = ("number_of_enrolled_courses", "reset_token", "reset_token_expires")

    fieldsets = BaseUserAdmin.fieldsets + (
        ("Learning", {"fields": ("name", "number_of_enrolled_courses")}),
        ("Password reset", {"fields": ("reset_token", "reset_token_expires")}),
    )
