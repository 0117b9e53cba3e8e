# apps/api/v1/urls.py
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.api.common.views import health_check
from apps.core.views import AdminAccountViewSet, UserViewSet

router = DefaultRouter()
router.register("users", UserViewSet, basename="user")
router.register("admin-accounts", AdminAccountViewSet, basename="admin-account")

urlpatterns = [
    # =========================
    # Domain APIs
    # =========================
    path("courses/", include("apps.domains.courses.urls")),
    path("assignments/", include("apps.domains.assignments.urls")),
    path("enrollments/", include("apps.domains.enrollment.urls")),

    # =========================
    # Auth / Core
    # =========================
    path("auth/", include("apps.core.auth_urls")),
    path("core/", include("apps.core.urls")),

    # =========================
    # Health
    # =========================
    path("health/", health_check, name="health"),

    # users / admin-accounts
    path("", include(router.urls)),
]
