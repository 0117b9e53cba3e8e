# domains/courses/admin.py

from django.contrib import admin
from .models import Course


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "title",
        "is_active",
        "number_of_students",
        "created_at",
    )
    list_display_links = ("id", "title")
    list_filter = ("is_active",)
    search_fields = ("title", "description")
    readonly_fields = ("number_of_students",)
    ordering = ("-id",)
