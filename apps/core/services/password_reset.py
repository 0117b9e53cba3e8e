# PATH: apps/core/services/password_reset.py
"""
비밀번호 재설정

- 요청: 계정 존재 여부와 무관하게 같은 메시지 (이메일 존재 여부 노출 금지)
- 토큰: 32바이트 난수 hex (64자), 1시간 유효
- 메일: Celery 태스크로 비동기 발송
"""
from __future__ import annotations

import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.utils import timezone

from academy.adapters.db.django import repositories_core as core_repo
from academy.domain.shared.errors import BadRequestError

logger = logging.getLogger(__name__)

RESET_TOKEN_BYTES = 32
RESET_TOKEN_TTL = timedelta(hours=1)

RESET_REQUEST_MESSAGE = "If an account exists with this email, a password reset link has been sent"
RESET_DONE_MESSAGE = "Password has been reset successfully"


def build_reset_url(token: str) -> str:
    base = (getattr(settings, "FRONTEND_URL", "") or "").rstrip("/")
    return f"{base}/reset-password?token={token}"


def request_password_reset(email: str) -> str:
    user = core_repo.user_get_by_email(email)
    if user is None:
        logger.info("[password_reset] request for unknown email (ignored)")
        return RESET_REQUEST_MESSAGE

    token = secrets.token_hex(RESET_TOKEN_BYTES)
    core_repo.user_save_reset_token(user, token, timezone.now() + RESET_TOKEN_TTL)

    from apps.shared.tasks.email import send_password_reset_email_task

    send_password_reset_email_task.delay(user.email, build_reset_url(token), user.name or "")
    logger.info("[password_reset] token issued user_id=%s", user.id)
    return RESET_REQUEST_MESSAGE


def reset_password(token: str, new_password: str) -> str:
    user = core_repo.user_get_by_valid_reset_token(token, timezone.now())
    if user is None:
        raise BadRequestError("Invalid or expired reset token", code="invalid_reset_token")

    user.set_password(new_password)
    user.save(update_fields=["password"])
    core_repo.user_clear_reset_token(user)

    logger.info("[password_reset] password changed user_id=%s", user.id)
    return RESET_DONE_MESSAGE
