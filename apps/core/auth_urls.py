# apps/core/auth_urls.py: /api/v1/auth/

from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from apps.api.common.auth_jwt import AdminTokenObtainPairView, EmailTokenObtainPairView
from apps.core.views import (
    LoggedInUsersCountView,
    LoggedInUsersView,
    PasswordResetRequestView,
    PasswordResetView,
    SignOutView,
    SignUpView,
)

urlpatterns = [
    path("sign-up/", SignUpView.as_view(), name="auth-sign-up"),
    path("sign-in/", EmailTokenObtainPairView.as_view(), name="auth-sign-in"),
    path("sign-in/admin/", AdminTokenObtainPairView.as_view(), name="auth-sign-in-admin"),
    path("refresh-token/", TokenRefreshView.as_view(), name="auth-refresh-token"),
    path("sign-out/", SignOutView.as_view(), name="auth-sign-out"),
    path("logged-in-users/", LoggedInUsersView.as_view(), name="auth-logged-in-users"),
    path("logged-in-users-count/", LoggedInUsersCountView.as_view(), name="auth-logged-in-users-count"),
    path("password-reset/request/", PasswordResetRequestView.as_view(), name="auth-password-reset-request"),
    path("password-reset/reset/", PasswordResetView.as_view(), name="auth-password-reset"),
]
