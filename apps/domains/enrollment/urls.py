# PATH: apps/domains/enrollment/urls.py

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import (
    CourseEnrollmentListView,
    CourseEnrollView,
    CourseUnenrollView,
    EnrollmentStateView,
    EnrollmentViewSet,
    SubmitAssignmentView,
    UserEnrollmentListView,
)

router = DefaultRouter()
router.register(r"", EnrollmentViewSet, basename="enrollment")

urlpatterns = [
    path(
        "submit-assignment/<int:course_id>/user/<int:user_id>/",
        SubmitAssignmentView.as_view(),
        name="enrollment-submit-assignment",
    ),
    path(
        "state/<int:course_id>/user/<int:user_id>/",
        EnrollmentStateView.as_view(),
        name="enrollment-state",
    ),
    path(
        "course-enroll/<int:course_id>/user/<int:user_id>/",
        CourseEnrollView.as_view(),
        name="enrollment-course-enroll",
    ),
    path(
        "course-unenroll/<int:course_id>/user/<int:user_id>/",
        CourseUnenrollView.as_view(),
        name="enrollment-course-unenroll",
    ),
    path("user/<int:user_id>/", UserEnrollmentListView.as_view(), name="enrollment-by-user"),
    path("course/<int:course_id>/", CourseEnrollmentListView.as_view(), name="enrollment-by-course"),
    path("", include(router.urls)),
]
