from django.contrib import admin

from .models import Assignment, Question


class QuestionInline(admin.TabularInline):
    model = Question
    extra = 0
    fields = ("order", "question_text", "answer")
    ordering = ("order", "id")


@admin.register(Assignment)
class AssignmentAdmin(admin.ModelAdmin):
    list_display = ("id", "course", "created_at")
    list_display_links = ("id", "course")
    search_fields = ("course__title",)
    inlines = [QuestionInline]
    ordering = ("-id",)
