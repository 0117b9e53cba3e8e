#apps/core/permissions.py

import hmac

from django.conf import settings
from rest_framework.permissions import BasePermission


def admin_secret_matches(candidate) -> bool:
    """설정된 ADMIN_SECRET 과 상수 시간 비교"""
    expected = getattr(settings, "ADMIN_SECRET", "") or ""
    if not candidate or not expected:
        return False
    return hmac.compare_digest(str(candidate).encode(), str(expected).encode())


def admin_secret_from_request(request) -> str:
    """X-Admin-Secret 헤더 우선, 없으면 ?admin_secret="""
    return (
        request.META.get("HTTP_X_ADMIN_SECRET")
        or request.query_params.get("admin_secret")
        or ""
    ).strip()


class IsAdminOrStaff(BasePermission):
    """
    관리자 / 운영자 전용 Permission
    """
    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and (user.is_superuser or user.is_staff)
        )


class IsSelfOrAdmin(BasePermission):
    """
    /users/{id}/: 본인 또는 관리자만
    """
    message = "You can only access your own account."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated)

    def has_object_permission(self, request, view, obj):
        user = request.user
        if user.is_staff or user.is_superuser:
            return True
        return obj.pk == user.pk


class HasAdminSecret(BasePermission):
    """
    관리자 계정 관리용 공유 시크릿 (로그인 불필요)
    - 없거나 틀리면 403
    """
    message = "Invalid admin secret."

    def has_permission(self, request, view):
        return admin_secret_matches(admin_secret_from_request(request))
