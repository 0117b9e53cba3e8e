from __future__ import annotations

from datetime import timedelta

import pytest
from django.core import mail
from django.utils import timezone

from apps.core.services.password_reset import RESET_REQUEST_MESSAGE

pytestmark = pytest.mark.django_db

REQUEST_URL = "/api/v1/auth/password-reset/request/"
RESET_URL = "/api/v1/auth/password-reset/reset/"


def test_request_sends_link(api_client, user, settings):
    res = api_client.post(REQUEST_URL, {"email": user.email}, format="json")

    assert res.status_code == 200
    assert res.data["message"] == RESET_REQUEST_MESSAGE

    user.refresh_from_db()
    assert len(user.reset_token) == 64
    assert user.reset_token_expires > timezone.now() + timedelta(minutes=59)

    assert len(mail.outbox) == 1
    assert mail.outbox[0].to == [user.email]
    assert f"{settings.FRONTEND_URL}/reset-password?token={user.reset_token}" in mail.outbox[0].body


def test_request_for_unknown_email_looks_the_same(api_client):
    res = api_client.post(REQUEST_URL, {"email": "ghost@example.com"}, format="json")

    assert res.status_code == 200
    assert res.data["message"] == RESET_REQUEST_MESSAGE
    assert mail.outbox == []


def test_email_skipped_when_not_configured(api_client, user, settings):
    settings.EMAIL_HOST_USER = ""
    res = api_client.post(REQUEST_URL, {"email": user.email}, format="json")

    assert res.status_code == 200
    assert mail.outbox == []
    user.refresh_from_db()
    assert user.reset_token


def test_reset_password(api_client, user):
    api_client.post(REQUEST_URL, {"email": user.email}, format="json")
    user.refresh_from_db()

    res = api_client.post(RESET_URL, {"token": user.reset_token, "new_password": "Brand9New"}, format="json")

    assert res.status_code == 200
    user.refresh_from_db()
    assert user.check_password("Brand9New")
    assert user.reset_token is None
    assert user.reset_token_expires is None


def test_reset_with_expired_token(api_client, user):
    user.reset_token = "a" * 64
    user.reset_token_expires = timezone.now() - timedelta(seconds=1)
    user.save()

    res = api_client.post(RESET_URL, {"token": "a" * 64, "new_password": "Brand9New"}, format="json")
    assert res.status_code == 400
    assert res.data["code"] == "invalid_reset_token"


def test_reset_with_unknown_token(api_client):
    res = api_client.post(RESET_URL, {"token": "b" * 64, "new_password": "Brand9New"}, format="json")
    assert res.status_code == 400


def test_reset_rejects_weak_password(api_client, user):
    api_client.post(REQUEST_URL, {"email": user.email}, format="json")
    user.refresh_from_db()

    res = api_client.post(RESET_URL, {"token": user.reset_token, "new_password": "weak"}, format="json")
    assert res.status_code == 400
