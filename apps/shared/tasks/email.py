# apps/shared/tasks/email.py
from __future__ import annotations

import logging
from smtplib import SMTPException

from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string
from django.utils.html import strip_tags

logger = logging.getLogger(__name__)

RESET_EMAIL_SUBJECT = "Password Reset Request"


@shared_task(
    bind=True,
    autoretry_for=(SMTPException, ConnectionError),
    retry_kwargs={"max_retries": 3, "countdown": 10},
)
def send_password_reset_email_task(self, email: str, reset_url: str, name: str = "") -> bool:
    """
    비밀번호 재설정 메일 발송.
    EMAIL_HOST_USER 미설정 시 발송 생략 (경고 로그만).
    """
    if not getattr(settings, "EMAIL_HOST_USER", ""):
        logger.warning("[password_reset_email] skipped: email is not configured to=%s", email)
        return False

    html = render_to_string(
        "core/email/reset_password.html",
        {"reset_url": reset_url, "name": name},
    )
    send_mail(
        subject=RESET_EMAIL_SUBJECT,
        message=strip_tags(html),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[email],
        html_message=html,
    )
    logger.info("[password_reset_email] sent to=%s attempt=%s", email, self.request.retries + 1)
    return True
