# apps/domains/assignments/urls.py
from django.urls import path

from .views.assignment_view import AssignmentByCourseView

urlpatterns = [
    path("course/<int:course_id>/", AssignmentByCourseView.as_view(), name="assignment-by-course"),
]
