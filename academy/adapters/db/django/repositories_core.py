"""
Core Repository: User (회원/관리자), 비밀번호 재설정 토큰, 로그인 중 사용자.
ORM 접근은 메서드 내부에서만 lazy import.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from academy.domain.enrollment.errors import UserNotFoundError


def _user_model():
    from django.contrib.auth import get_user_model
    return get_user_model()


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------


def user_get_by_id(user_id) -> Optional[Any]:
    return _user_model().objects.filter(id=user_id).first()


def user_get_by_email(email: str) -> Optional[Any]:
    if not email:
        return None
    return _user_model().objects.filter(email__iexact=email.strip()).first()


def user_email_exists(email: str) -> bool:
    return _user_model().objects.filter(email__iexact=(email or "").strip()).exists()


def user_create(*, email: str, password: str, name: Optional[str] = None, is_staff: bool = False):
    email = email.strip()
    return _user_model().objects.create_user(
        username=email,
        email=email,
        password=password,
        name=name,
        is_staff=is_staff,
    )


def user_queryset():
    return _user_model().objects.all()


def admin_queryset():
    return _user_model().objects.filter(is_staff=True)


def user_adjust_enrollment_count(user_id, delta: int) -> int:
    from django.db.models import F
    return _user_model().objects.filter(id=user_id).update(
        number_of_enrolled_courses=F("number_of_enrolled_courses") + int(delta)
    )


class DjangoUserRepository:
    """UserRepository 구현."""

    def exists(self, user_id: int) -> bool:
        return _user_model().objects.filter(id=user_id).exists()

    def adjust_enrollment_count(self, user_id: int, delta: int) -> None:
        if user_adjust_enrollment_count(user_id, delta) == 0:
            raise UserNotFoundError()


# ---------------------------------------------------------------------------
# Password reset token
# ---------------------------------------------------------------------------


def user_save_reset_token(user, token: str, expires: datetime) -> None:
    user.reset_token = token
    user.reset_token_expires = expires
    user.save(update_fields=["reset_token", "reset_token_expires"])


def user_get_by_valid_reset_token(token: str, now: datetime) -> Optional[Any]:
    if not token:
        return None
    return _user_model().objects.filter(
        reset_token=token,
        reset_token_expires__gt=now,
    ).first()


def user_clear_reset_token(user) -> None:
    user.reset_token = None
    user.reset_token_expires = None
    user.save(update_fields=["reset_token", "reset_token_expires"])


# ---------------------------------------------------------------------------
# Logged-in users (simplejwt outstanding / blacklist 테이블 기준)
# ---------------------------------------------------------------------------


def logged_in_user_queryset(now: datetime):
    """
    만료 전 + 블랙리스트 아닌 refresh token 을 하나 이상 가진 사용자.
    DB 에 저장되므로 인스턴스가 여러 개여도 결과가 같다.
    """
    from rest_framework_simplejwt.token_blacklist.models import OutstandingToken

    user_ids = (
        OutstandingToken.objects.filter(
            user__isnull=False,
            expires_at__gt=now,
            blacklistedtoken__isnull=True,
        )
        .values_list("user_id", flat=True)
        .distinct()
    )
    return _user_model().objects.filter(id__in=user_ids)
