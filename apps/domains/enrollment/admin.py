from django.contrib import admin
from .models import Enrollment


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "user",
        "course",
        "completed",
        "test_passed",
        "date_last_attempt",
        "enrollment_date",
    )
    list_display_links = ("id", "user")
    list_filter = ("completed", "test_passed", "course")
    search_fields = ("user__email", "course__title")
    ordering = ("-id",)
