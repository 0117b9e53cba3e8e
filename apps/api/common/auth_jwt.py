# 이메일 + 비밀번호 로그인. 응답에 user 포함, 관리자 로그인은 is_admin 클레임 추가.
from __future__ import annotations

import logging

from academy.adapters.db.django import repositories_core as core_repo
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenObtainPairView

logger = logging.getLogger(__name__)


def issue_tokens(user, *, is_admin: bool = False) -> dict:
    """refresh/access 발급 (blacklist 앱이 OutstandingToken 기록)"""
    from apps.core.serializers import UserSerializer

    refresh = RefreshToken.for_user(user)
    refresh["email"] = user.email
    if is_admin:
        refresh["is_admin"] = True
    return {
        "user": UserSerializer(user).data,
        "refresh": str(refresh),
        "access": str(refresh.access_token),
    }


class EmailTokenObtainPairSerializer(TokenObtainPairSerializer):
    """email / password 로 로그인. 실패 시 401."""

    username_field = "email"
    admin_only = False

    def validate(self, attrs):
        email = (attrs.get("email") or "").strip()
        password = attrs.get("password") or ""

        user = core_repo.user_get_by_email(email)
        if not user or not user.check_password(password):
            logger.info("[auth] sign-in failed email=%s admin=%s", email, self.admin_only)
            raise AuthenticationFailed("Invalid credentials", code="invalid_credentials")
        if not user.is_active:
            raise AuthenticationFailed("User account is disabled", code="user_inactive")
        if self.admin_only and not (user.is_staff or user.is_superuser):
            logger.info("[auth] admin sign-in rejected user_id=%s", user.id)
            raise AuthenticationFailed("Invalid credentials", code="invalid_credentials")

        return issue_tokens(user, is_admin=self.admin_only)


class AdminTokenObtainPairSerializer(EmailTokenObtainPairSerializer):
    admin_only = True


class EmailTokenObtainPairView(TokenObtainPairView):
    serializer_class = EmailTokenObtainPairSerializer


class AdminTokenObtainPairView(TokenObtainPairView):
    serializer_class = AdminTokenObtainPairSerializer
